"""
bdface.core.raster - intensity raster

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from ..base import safe_import
Image = safe_import('PIL.Image')


# digits for the default text representation of grey levels
INKDIGITS = '0123456789abcdef'


class Raster:
    """Immutable matrix of 8-bit intensities, one byte per pixel, row-major."""

    def __init__(self, pixels=b'', width=0, height=0, *, levels=2):
        """
        Create raster from flat pixel bytes.

        pixels: width * height intensity samples, 0 for paper, 255 for full ink
        levels: number of distinct grey levels the samples were decoded from
        """
        pixels = bytes(pixels)
        if len(pixels) != width * height:
            raise ValueError(
                f'Raster of {width}x{height} needs {width*height} pixels, '
                f'not {len(pixels)}'
            )
        self._pixels = pixels
        self._width = width
        self._height = height
        self._levels = levels

    @classmethod
    def blank(cls, width=0, height=0, levels=2):
        """Create uninked raster."""
        return cls(bytes(width * height), width, height, levels=levels)

    def __repr__(self):
        return (
            f'{type(self).__name__}(<{len(self._pixels)} bytes>, '
            f'{self._width}, {self._height}, levels={self._levels})'
        )

    def __eq__(self, other):
        return (
            isinstance(other, Raster)
            and (self._width, self._height, self._pixels)
            == (other._width, other._height, other._pixels)
        )

    def __hash__(self):
        return hash((self._width, self._height, self._pixels))

    def __bool__(self):
        """Raster is not empty."""
        return bool(self._height and self._width)

    @property
    def width(self):
        """Raster width."""
        return self._width

    @property
    def height(self):
        """Raster height."""
        return self._height

    @property
    def stride(self):
        """Bytes per row."""
        return self._width

    @property
    def levels(self):
        """Number of shades of ink."""
        return self._levels

    @property
    def pixels(self):
        """Flat intensity samples."""
        return self._pixels

    def row(self, y):
        """Intensity samples of one row."""
        if not 0 <= y < self._height:
            raise IndexError(f'Row {y} out of range')
        return self._pixels[y*self.stride : y*self.stride + self._width]

    def __getitem__(self, xy):
        """Intensity at (x, y)."""
        x, y = xy
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f'Pixel {xy} out of range')
        return self._pixels[y*self.stride + x]

    def is_blank(self):
        """Raster has no ink."""
        return not any(self._pixels)

    def as_matrix(self):
        """Return tuple of rows of intensity values."""
        return tuple(tuple(self.row(_y)) for _y in range(self._height))

    def as_text(self, *, inklevels=None, start='', end='\n'):
        """Convert raster to text."""
        if not self._height:
            return ''
        if inklevels is None:
            if self._levels > len(INKDIGITS):
                raise ValueError(
                    f'No default text representation for {self._levels} levels'
                )
            # default text representation uses . for paper and @ for full ink
            inklevels = '.' + INKDIGITS[1:self._levels-1] + '@'
        top = self._levels - 1
        # map intensities back onto the grey levels they came from
        shades = [inklevels[round(_i * top / 255)] for _i in range(256)]
        return start + (end+start).join(
            ''.join(shades[_p] for _p in self.row(_y))
            for _y in range(self._height)
        ) + end

    def as_image(self):
        """Convert raster to an 8-bit greyscale PIL image, usable as a mask."""
        if not Image:
            raise ImportError('Rendering to image requires PIL module.')
        if not self:
            return Image.new('L', (self._width, self._height))
        return Image.frombytes('L', (self._width, self._height), self._pixels)
