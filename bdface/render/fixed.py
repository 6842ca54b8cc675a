"""
bdface.render.fixed - 26.6 fixed-point arithmetic

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from ..base import Coord, Rect


# number of fractional bits
SHIFT = 6


def to_fixed(value):
    """Integer to 26.6 fixed point."""
    return value << SHIFT


def floor(value):
    """26.6 fixed point to integer, rounding towards negative infinity."""
    return value >> SHIFT


def fixed_coord(x, y):
    """Coord in 26.6 fixed point from integer components."""
    return Coord(to_fixed(x), to_fixed(y))


def fixed_rect(left, top, right, bottom):
    """Rect in 26.6 fixed point from integer edges."""
    return Rect(to_fixed(left), to_fixed(top), to_fixed(right), to_fixed(bottom))
