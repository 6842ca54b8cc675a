"""
bdface test suite
bitmap row decoding tests
"""

import unittest

from bdface.base.binary import unpack_row, intensity_table
from .base import BaseTester


class TestUnpackRow(BaseTester):
    """Test conversion of packed bits to intensities."""

    def test_all_ink(self):
        self.assertEqual(unpack_row(b'\xff\xff', 16), b'\xff' * 16)

    def test_all_paper(self):
        self.assertEqual(unpack_row(b'\0\0', 16), bytes(16))

    def test_msb_first(self):
        self.assertEqual(
            unpack_row(b'\x81', 8),
            bytes((255, 0, 0, 0, 0, 0, 0, 255))
        )

    def test_padding_not_sampled(self):
        # 5 pixels; the low 3 bits are padding
        self.assertEqual(unpack_row(b'\x8f', 5), bytes((255, 0, 0, 0, 255)))

    def test_across_bytes(self):
        self.assertEqual(
            unpack_row(b'\x00\x80', 9), bytes(8) + b'\xff'
        )

    def test_excess_bytes(self):
        self.assertEqual(unpack_row(b'\xc0\xff\xff', 2), b'\xff\xff')

    def test_two_bit(self):
        self.assertEqual(unpack_row(b'\x1b', 4, 2), bytes((0, 85, 170, 255)))

    def test_two_bit_across_bytes(self):
        # 3 pixels of 2 bits in the top 6 bits of 0xe4: 11 10 01
        self.assertEqual(unpack_row(b'\xe4', 3, 2), bytes((255, 170, 85)))

    def test_four_bit(self):
        self.assertEqual(unpack_row(b'\x0f\x58', 3, 4), bytes((0, 255, 85)))

    def test_eight_bit(self):
        self.assertEqual(unpack_row(b'\x00\x7f\xff', 3, 8), b'\x00\x7f\xff')

    def test_three_bit(self):
        # 111 011 00 -> 7, 3
        self.assertEqual(unpack_row(b'\xec', 2, 3), bytes((255, 109)))

    def test_zero_width(self):
        self.assertEqual(unpack_row(b'', 0), b'')

    def test_too_short(self):
        with self.assertRaises(ValueError):
            unpack_row(b'\xff', 9)
        with self.assertRaises(ValueError):
            unpack_row(b'\xff', 5, 2)

    def test_bad_depth(self):
        with self.assertRaises(ValueError):
            unpack_row(b'\xff', 1, 0)
        with self.assertRaises(ValueError):
            unpack_row(b'\xff\xff', 1, 9)


class TestIntensityTable(BaseTester):
    """Test bit depth scaling."""

    def test_one_bit(self):
        self.assertEqual(intensity_table(1), b'\x00\xff')

    def test_two_bit(self):
        table = intensity_table(2)
        self.assertEqual(tuple(table), tuple(round(_v * 255 / 3) for _v in range(4)))
        self.assertEqual(table[0], 0)
        self.assertEqual(table[3], 255)

    def test_eight_bit(self):
        self.assertEqual(intensity_table(8), bytes(range(256)))


if __name__ == '__main__':
    unittest.main()
