"""
bdface.base - supporting classes

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .basetypes import Coord, Rect, to_int
from . import binary
from .imports import safe_import
