"""
bdface - load BDF bitmap fonts and query their glyphs

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .base import Coord, Rect
from .core import Font, Character, Raster
from .encoding import get_charmap, to_codepoint
from .storage import (
    load, parse,
    FileFormatError, MalformedLine, GlyphCountMismatch,
    MalformedBitmapRow, UnterminatedGlyph,
)
from .render import (
    Face, FontFace, Metrics, GlyphRaster, GlyphBounds, GlyphAdvance,
)
