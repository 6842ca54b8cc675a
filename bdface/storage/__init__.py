"""
bdface.storage - font loading

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .magic import (
    FileFormatError, MalformedLine, GlyphCountMismatch,
    MalformedBitmapRow, UnterminatedGlyph,
)
from .fontformats.bdf import load_bdf as load, parse_bdf as parse
