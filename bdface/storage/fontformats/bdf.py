"""
bdface.storage.fontformats.bdf - Adobe Glyph Bitmap Distribution Format

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging

from ...base import to_int
from ...base.binary import unpack_row, MAX_BITS_PER_PIXEL
from ...core import Font, Character, Raster
from ...encoding import get_charmap, to_codepoint
from ..magic import (
    MalformedLine, GlyphCountMismatch, MalformedBitmapRow, UnterminatedGlyph,
)


def load_bdf(instream, *, charset=None):
    """
    Load font from an open Adobe Glyph Bitmap Distribution Format (BDF) stream.

    instream: text or binary stream
    charset: charset identifier to use instead of the declared registry-encoding
    """
    return parse_bdf(instream, charset=charset)


def parse_bdf(data, *, charset=None):
    """
    Parse BDF font.

    data: bytes, str, or iterable of lines as str or bytes
    charset: charset identifier to use instead of the declared registry-encoding
    """
    lines = enumerate(_iter_lines(data), start=1)
    props = _read_bdf_global(lines)
    logging.info('bdf properties:')
    for name, value in props.items():
        logging.info('    %s: %s', name, value)
    if charset is None:
        charset = f"{props['registry']}-{props['encoding']}"
    else:
        logging.info('Overriding declared charset with `%s`', charset)
    charmap = get_charmap(charset)
    if charmap is None:
        logging.debug('Charset `%s` not recognised; using raw codes', charset)
    characters, index = _read_bdf_glyphs(
        lines, props['nchars'], charmap, props['bits_per_pixel']
    )
    return Font(
        characters, index=index,
        name=props['name'],
        point_size=props['point_size'],
        pixel_size=props['pixel_size'],
        dpi=props['dpi'],
        bits_per_pixel=props['bits_per_pixel'],
        ascent=props['ascent'],
        descent=props['descent'],
        cap_height=props['cap_height'],
        x_height=props['x_height'],
        charset=charset,
        default_codepoint=to_codepoint(charmap, props['default_char']),
        source_format=f"BDF v{props['version']}" if props['version'] else '',
        comment='\n'.join(props['comment']),
    )


def _iter_lines(data):
    """Iterate over lines of text, without line endings."""
    if isinstance(data, (bytes, bytearray)):
        # bdf is printable ascii; latin-1 never fails
        data = data.decode('latin-1')
    if isinstance(data, str):
        # only \n ends a line, as when iterating over a binary stream
        data = data.split('\n')
    for line in data:
        if isinstance(line, (bytes, bytearray)):
            line = line.decode('latin-1')
        yield line.rstrip('\r\n')


##############################################################################
# BDF reader
# BDF specification: https://adobe-type-tools.github.io/font-tech-notes/pdfs/5005.BDF_Spec.pdf

def _strip_quotes(value):
    """Strip matching double quotes from a property value."""
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def _bdf_ints(keyword, args, count, lineno, line, optional=0):
    """Convert `count` to `count+optional` integer arguments."""
    if len(args) < count:
        raise MalformedLine(
            f'{keyword} needs {count} values, found {len(args)}', lineno, line
        )
    try:
        return tuple(to_int(_a) for _a in args[:count+optional])
    except ValueError:
        raise MalformedLine(
            f'{keyword} values must be integers', lineno, line
        ) from None


def _bdf_str(keyword, line, lineno):
    """Get the string value following the keyword."""
    value = ''.join(line.strip().split(None, 1)[1:])
    value = _strip_quotes(value.strip())
    if not value:
        raise MalformedLine(f'{keyword} needs a value', lineno, line)
    return value


# global keywords with a single integer value
_GLOBAL_INTS = {
    'PIXEL_SIZE': 'pixel_size',
    'FONT_ASCENT': 'ascent',
    'FONT_DESCENT': 'descent',
    'CAP_HEIGHT': 'cap_height',
    'X_HEIGHT': 'x_height',
    'DEFAULT_CHAR': 'default_char',
}

# global keywords with a string value
_GLOBAL_STRS = {
    'STARTFONT': 'version',
    'FONT': 'name',
    'CHARSET_REGISTRY': 'registry',
    'CHARSET_ENCODING': 'encoding',
}


def _read_bdf_global(lines):
    """Read global section of BDF file, up to and including CHARS."""
    props = dict(
        version='', name='',
        point_size=0, dpi=(0, 0), bits_per_pixel=1, pixel_size=0,
        ascent=0, descent=0, cap_height=0, x_height=0,
        registry='', encoding='', default_char=32,
        comment=[],
    )
    for lineno, line in lines:
        keyword, *args = line.split() or ('',)
        if keyword == 'COMMENT':
            props['comment'].append(line.strip()[8:])
        elif keyword in _GLOBAL_INTS:
            props[_GLOBAL_INTS[keyword]], = _bdf_ints(keyword, args, 1, lineno, line)
        elif keyword in _GLOBAL_STRS:
            props[_GLOBAL_STRS[keyword]] = _bdf_str(keyword, line, lineno)
        elif keyword == 'SIZE':
            size, xdpi, ydpi, *depth = _bdf_ints(
                keyword, args, 3, lineno, line, optional=1
            )
            props['point_size'] = size
            props['dpi'] = (xdpi, ydpi)
            if depth:
                props['bits_per_pixel'], = depth
                if not 1 <= depth[0] <= MAX_BITS_PER_PIXEL:
                    raise MalformedLine(
                        f'Unsupported bit depth {depth[0]}', lineno, line
                    )
                if depth[0] not in (1, 2, 4, 8):
                    logging.warning('Unusual bit depth %d', depth[0])
        elif keyword == 'CHARS':
            props['nchars'], = _bdf_ints(keyword, args, 1, lineno, line)
            if props['nchars'] < 0:
                raise MalformedLine('Negative glyph count', lineno, line)
            return props
        elif keyword:
            logging.debug('Ignoring line %d: %r', lineno, line)
    raise MalformedLine('End of file before CHARS declaration')


def _read_bdf_glyphs(lines, nchars, charmap, bits_per_pixel):
    """Read character section; return characters and code point index."""
    characters = []
    index = {}
    # properties of the glyph being built; None between glyph blocks
    glyph = None
    # pixel buffer; None unless in BITMAP mode
    bitmap = None
    row = -1
    levels = 2**bits_per_pixel
    for lineno, line in lines:
        keyword, *args = line.split() or ('',)
        if not keyword:
            continue
        if bitmap is not None:
            if keyword in ('STARTCHAR', 'ENDFONT'):
                raise UnterminatedGlyph(
                    f"{keyword} before ENDCHAR of glyph `{glyph['name']}`",
                    lineno, line
                )
            if keyword != 'ENDCHAR':
                row += 1
                _read_bitmap_row(
                    glyph, bitmap, row, keyword, bits_per_pixel, lineno, line
                )
                continue
        elif keyword == 'STARTCHAR':
            if glyph is not None:
                raise UnterminatedGlyph(
                    f"STARTCHAR before ENDCHAR of glyph `{glyph['name']}`",
                    lineno, line
                )
            if len(characters) >= nchars:
                raise GlyphCountMismatch(
                    f'More glyphs than the {nchars} declared', lineno, line
                )
            glyph = dict(
                name=_bdf_str(keyword, line, lineno),
                codepoint=None, advance=(0, 0), offset=(0, 0), size=None,
                lineno=lineno,
            )
            continue
        elif keyword == 'ENDFONT':
            break
        elif keyword not in ('ENCODING', 'DWIDTH', 'BBX', 'BITMAP', 'ENDCHAR'):
            logging.debug('Ignoring line %d: %r', lineno, line)
            continue
        if glyph is None:
            raise MalformedLine(f'{keyword} outside glyph block', lineno, line)
        if keyword == 'ENCODING':
            # ENCODING must be single integer or -1 followed by integer
            *_, code = _bdf_ints(keyword, args, 1, lineno, line, optional=1)
            if code >= 0:
                glyph['codepoint'] = to_codepoint(charmap, code)
            else:
                glyph['codepoint'] = None
        elif keyword == 'DWIDTH':
            glyph['advance'] = _bdf_ints(keyword, args, 2, lineno, line)
        elif keyword == 'BBX':
            width, height, offx, offy = _bdf_ints(keyword, args, 4, lineno, line)
            if width < 0 or height < 0:
                raise MalformedLine('Negative bounding box size', lineno, line)
            glyph['size'] = (width, height)
            glyph['offset'] = (offx, offy)
        elif keyword == 'BITMAP':
            if glyph['size'] is None:
                raise MalformedLine('BITMAP before BBX', lineno, line)
            width, height = glyph['size']
            bitmap = bytearray(width * height)
            row = -1
        elif keyword == 'ENDCHAR':
            char = _convert_bdf_glyph(glyph, bitmap, levels)
            characters.append(char)
            if char.codepoint is not None:
                if char.codepoint in index:
                    logging.debug(
                        'Glyph `%s` replaces `%s` at code point %d',
                        char.name, index[char.codepoint].name, char.codepoint
                    )
                index[char.codepoint] = char
            glyph, bitmap = None, None
    if glyph is not None:
        raise UnterminatedGlyph(
            f"End of file inside glyph `{glyph['name']}`", glyph['lineno']
        )
    if len(characters) != nchars:
        raise GlyphCountMismatch(
            f'Found {len(characters)} glyphs, {nchars} declared'
        )
    return characters, index


def _read_bitmap_row(glyph, bitmap, row, hexstr, bits_per_pixel, lineno, line):
    """Decode one hex row into the bitmap buffer."""
    width, height = glyph['size']
    if row >= height:
        raise MalformedBitmapRow(
            f"More than {height} rows in glyph `{glyph['name']}`", lineno, line
        )
    try:
        samples = unpack_row(bytes.fromhex(hexstr), width, bits_per_pixel)
    except ValueError as e:
        raise MalformedBitmapRow(
            f"Could not read glyph `{glyph['name']}`: {e}", lineno, line
        ) from e
    bitmap[row*width : (row+1)*width] = samples


def _convert_bdf_glyph(glyph, bitmap, levels):
    """Create character from collected glyph properties."""
    if glyph['size'] is None:
        logging.warning('Glyph `%s` has no bounding box', glyph['name'])
        raster = Raster.blank(levels=levels)
    else:
        width, height = glyph['size']
        if bitmap is None:
            logging.warning('Glyph `%s` has no bitmap', glyph['name'])
            bitmap = bytes(width * height)
        raster = Raster(bitmap, width, height, levels=levels)
    return Character(
        raster,
        name=glyph['name'],
        codepoint=glyph['codepoint'],
        advance=glyph['advance'],
        offset=glyph['offset'],
    )
