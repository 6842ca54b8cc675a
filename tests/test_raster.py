"""
bdface test suite
raster tests
"""

import unittest

from bdface import Raster, Character
from bdface.core.raster import Image
from .base import BaseTester, assert_text_eq


class TestRaster(BaseTester):
    """Test intensity rasters."""

    def test_dimensions(self):
        raster = Raster(bytes(6), 3, 2)
        self.assertEqual((raster.width, raster.height, raster.stride), (3, 2, 3))
        self.assertTrue(raster)
        self.assertFalse(Raster())

    def test_size_mismatch(self):
        with self.assertRaises(ValueError):
            Raster(bytes(5), 3, 2)

    def test_access(self):
        raster = Raster(bytes((0, 255, 0, 255, 0, 0)), 3, 2)
        self.assertEqual(raster.row(1), bytes((255, 0, 0)))
        self.assertEqual(raster[1, 0], 255)
        self.assertEqual(raster[0, 1], 255)
        self.assertEqual(raster.as_matrix(), ((0, 255, 0), (255, 0, 0)))
        with self.assertRaises(IndexError):
            raster.row(2)
        with self.assertRaises(IndexError):
            raster[3, 0]

    def test_blank(self):
        raster = Raster.blank(4, 3)
        self.assertTrue(raster.is_blank())
        self.assertEqual(raster.pixels, bytes(12))
        self.assertFalse(self.font6x8.lookup(65).raster.is_blank())

    def test_as_text(self):
        assert_text_eq(self.font6x8.lookup(65).as_text(), self.font6x8_A)

    def test_as_text_greyscale(self):
        ramp = self.grey.lookup(0x2212)
        self.assertEqual(ramp.raster.levels, 4)
        assert_text_eq(ramp.as_text(), '.12@\n@21.\n')

    def test_as_text_inklevels(self):
        ramp = self.grey.lookup(0x2212)
        assert_text_eq(ramp.as_text(inklevels=' -=#'), ' -=#\n#=- \n')

    def test_as_text_8bit(self):
        with self.assertRaises(ValueError):
            Raster(b'\x80', 1, 1, levels=256).as_text()

    def test_empty_as_text(self):
        self.assertEqual(self.font6x8.lookup(32).as_text(), '')

    def test_equality(self):
        a = self.font6x8.lookup(65)
        self.assertEqual(a, Character(
            Raster(a.raster.pixels, 5, 7), name='A', codepoint=65,
            advance=(6, 0), offset=(0, 0),
        ))
        self.assertNotEqual(a, self.font6x8.lookup(233))


@unittest.skipIf(Image is None, 'PIL not available')
class TestImage(BaseTester):
    """Test conversion to image masks."""

    def test_as_image(self):
        image = self.font6x8.lookup(65).raster.as_image()
        self.assertEqual(image.mode, 'L')
        self.assertEqual(image.size, (5, 7))
        self.assertEqual(image.getpixel((2, 0)), 255)
        self.assertEqual(image.getpixel((0, 0)), 0)

    def test_as_image_greyscale(self):
        image = self.grey.lookup(0x2212).raster.as_image()
        self.assertEqual(
            [image.getpixel((_x, 0)) for _x in range(4)], [0, 85, 170, 255]
        )

    def test_empty_image(self):
        image = self.font6x8.lookup(32).raster.as_image()
        self.assertEqual(image.size, (0, 0))


if __name__ == '__main__':
    unittest.main()
