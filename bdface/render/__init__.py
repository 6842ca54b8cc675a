"""
bdface.render - glyph queries for text renderers

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .face import Face, FontFace, Metrics, GlyphRaster, GlyphBounds, GlyphAdvance
from . import fixed
