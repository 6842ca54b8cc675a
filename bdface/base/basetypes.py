"""
bdface.base.basetypes - base data types and converters

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from collections import namedtuple


def to_int(int_str):
    """Convert decimal string to int; raises ValueError if not an integer."""
    if isinstance(int_str, int):
        return int_str
    return int(int_str, 10)


class Coord(namedtuple('Coord', 'x y')):
    """Coordinate tuple."""

    @classmethod
    def create(cls, coord=0):
        if isinstance(coord, int):
            return cls(coord, coord)
        return cls(*coord)


class Rect(namedtuple('Rect', 'left top right bottom')):
    """
    Rectangle in image coordinates: y grows downwards.
    The left and top edges are inclusive, right and bottom exclusive.
    """

    @property
    def width(self):
        return self.right - self.left

    @property
    def height(self):
        return self.bottom - self.top

    def __bool__(self):
        """Rectangle is not empty."""
        return self.width > 0 and self.height > 0

    def translate(self, offset):
        """Move rectangle by a Coord."""
        x, y = offset
        return type(self)(
            self.left + x, self.top + y, self.right + x, self.bottom + y
        )
