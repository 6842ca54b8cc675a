"""
bdface.core.font - representation of font and glyphs

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from types import MappingProxyType

from ..base import Coord
from .raster import Raster


class Character:
    """One decoded glyph: name, code point, advance, raster offset and raster."""

    __slots__ = ('_name', '_codepoint', '_advance', '_offset', '_raster')

    def __init__(
            self, raster=None, *,
            name='', codepoint=None, advance=(0, 0), offset=(0, 0),
        ):
        """
        Create character.

        raster: Raster with the glyph's intensities
        name: glyph identifier, not used for lookup
        codepoint: resolved code point, None if unencoded
        advance: (x, y) pen displacement in pixels
        offset: (x, y) of the raster's lower-left corner relative to the origin
        """
        self._raster = raster if raster is not None else Raster()
        self._name = name
        self._codepoint = codepoint
        self._advance = Coord.create(advance)
        self._offset = Coord.create(offset)

    def __repr__(self):
        return (
            f'{type(self).__name__}({self._raster!r}, name={self._name!r}, '
            f'codepoint={self._codepoint!r}, advance={tuple(self._advance)}, '
            f'offset={tuple(self._offset)})'
        )

    def __eq__(self, other):
        return isinstance(other, Character) and (
            (self._name, self._codepoint, self._advance, self._offset, self._raster)
            == (other._name, other._codepoint, other._advance, other._offset, other._raster)
        )

    def __hash__(self):
        return hash((self._name, self._codepoint, self._advance, self._offset))

    @property
    def name(self):
        return self._name

    @property
    def codepoint(self):
        return self._codepoint

    @property
    def advance(self):
        return self._advance

    @property
    def offset(self):
        return self._offset

    @property
    def raster(self):
        return self._raster

    @property
    def width(self):
        return self._raster.width

    @property
    def height(self):
        return self._raster.height

    def as_text(self, **kwargs):
        """Text representation of the glyph raster."""
        return self._raster.as_text(**kwargs)


class Font:
    """Decoded bitmap font. Immutable after construction."""

    def __init__(
            self, characters=(), *,
            index=None,
            name='', point_size=0, pixel_size=0, dpi=(0, 0), bits_per_pixel=1,
            ascent=0, descent=0, cap_height=0, x_height=0,
            charset='', default_codepoint=32,
            source_format='', comment='',
        ):
        """
        Create font from characters and global properties.

        characters: iterable of Character, in source order
        index: mapping code point -> Character; built from the characters if
            not given, later characters taking precedence
        """
        self._characters = tuple(characters)
        if index is None:
            index = {
                _c.codepoint: _c
                for _c in self._characters
                if _c.codepoint is not None
            }
        self._index = MappingProxyType(dict(index))
        self._name = name
        self._point_size = point_size
        self._pixel_size = pixel_size
        self._dpi = Coord.create(dpi)
        self._bits_per_pixel = bits_per_pixel
        self._ascent = ascent
        self._descent = descent
        self._cap_height = cap_height
        self._x_height = x_height
        self._charset = charset
        self._default_codepoint = default_codepoint
        self._source_format = source_format
        self._comment = comment

    def __repr__(self):
        return (
            f'<{type(self).__name__} name={self._name!r} '
            f'characters={len(self._characters)}>'
        )

    def __len__(self):
        return len(self._characters)

    def __iter__(self):
        return iter(self._characters)

    @property
    def characters(self):
        return self._characters

    @property
    def index(self):
        """Read-only mapping from code point to character."""
        return self._index

    @property
    def name(self):
        return self._name

    @property
    def point_size(self):
        return self._point_size

    @property
    def pixel_size(self):
        return self._pixel_size

    @property
    def dpi(self):
        return self._dpi

    @property
    def bits_per_pixel(self):
        return self._bits_per_pixel

    @property
    def ascent(self):
        return self._ascent

    @property
    def descent(self):
        return self._descent

    @property
    def cap_height(self):
        return self._cap_height

    @property
    def x_height(self):
        return self._x_height

    @property
    def line_height(self):
        return self._ascent + self._descent

    @property
    def charset(self):
        return self._charset

    @property
    def default_codepoint(self):
        return self._default_codepoint

    @property
    def source_format(self):
        return self._source_format

    @property
    def comment(self):
        return self._comment

    def lookup(self, codepoint):
        """Get character for code point; the default character if not present; None if neither is."""
        try:
            return self._index[codepoint]
        except KeyError:
            return self._index.get(self._default_codepoint)

    def get_default_glyph(self):
        """Get default character, or None if not defined."""
        return self._index.get(self._default_codepoint)

    def new_face(self):
        """Create a query face over this font."""
        # late import: render depends on core
        from ..render.face import FontFace
        return FontFace(self)
