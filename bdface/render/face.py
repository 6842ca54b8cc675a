"""
bdface.render.face - glyph query interface for text renderers

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from collections import namedtuple

from ..base import Coord, Rect
from .fixed import to_fixed, floor, fixed_rect


# all values in 26.6 fixed point
Metrics = namedtuple('Metrics', 'ascent descent cap_height x_height height')

# rect is in integer pixels, advance in 26.6 fixed point
GlyphRaster = namedtuple('GlyphRaster', 'rect mask mask_origin advance found')
GlyphBounds = namedtuple('GlyphBounds', 'bounds advance found')
GlyphAdvance = namedtuple('GlyphAdvance', 'advance found')


class Face:
    """
    Glyph query interface.

    Implementations answer metric, advance and mask questions for a code point.
    A missing glyph is reported with `found` set to False, not with an exception.
    """

    def metrics(self):
        """Font-wide metrics, as Metrics."""
        raise NotImplementedError

    def kern(self, left, right):
        """Kerning adjustment between two code points, in 26.6 fixed point."""
        raise NotImplementedError

    def glyph_raster(self, pen, codepoint):
        """
        Destination rectangle, mask and advance for drawing a glyph at `pen`.

        pen: (x, y) in 26.6 fixed point, y growing downwards
        Returns GlyphRaster.
        """
        raise NotImplementedError

    def glyph_bounds(self, codepoint):
        """Bounds relative to the glyph origin and advance, as GlyphBounds."""
        raise NotImplementedError

    def glyph_advance(self, codepoint):
        """Horizontal advance, as GlyphAdvance."""
        raise NotImplementedError

    def close(self):
        """Release resources held by the face."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


class FontFace(Face):
    """Face over a parsed Font."""

    def __init__(self, font):
        self._font = font

    def __repr__(self):
        return f'{type(self).__name__}({self._font!r})'

    @property
    def font(self):
        return self._font

    def metrics(self):
        font = self._font
        return Metrics(
            ascent=to_fixed(font.ascent),
            descent=to_fixed(font.descent),
            cap_height=to_fixed(font.cap_height),
            x_height=to_fixed(font.x_height),
            height=to_fixed(font.line_height),
        )

    def kern(self, left, right):
        # BDF has no kerning table
        return 0

    def glyph_raster(self, pen, codepoint):
        char = self._font.lookup(codepoint)
        if char is None:
            return GlyphRaster(Rect(0, 0, 0, 0), None, Coord(0, 0), 0, False)
        pen_x, pen_y = pen
        # x offset moves right, y offset moves up, i.e. towards smaller y
        x = floor(pen_x) + char.offset.x
        y = floor(pen_y) - char.offset.y
        rect = Rect(0, -char.height, char.width, 0).translate((x, y))
        return GlyphRaster(
            rect, char.raster, Coord(0, 0), to_fixed(char.advance.x), True
        )

    def glyph_bounds(self, codepoint):
        char = self._font.lookup(codepoint)
        if char is None:
            return GlyphBounds(
                fixed_rect(0, -self._font.ascent, 0, self._font.descent),
                0, False
            )
        left, bottom = char.offset
        bounds = fixed_rect(
            left, -(bottom + char.height), left + char.width, -bottom
        )
        return GlyphBounds(bounds, to_fixed(char.advance.x), True)

    def glyph_advance(self, codepoint):
        char = self._font.lookup(codepoint)
        if char is None:
            return GlyphAdvance(0, False)
        return GlyphAdvance(to_fixed(char.advance.x), True)
