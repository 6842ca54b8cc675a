"""
bdface.core - font, glyph and raster classes

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .raster import Raster
from .font import Font, Character
