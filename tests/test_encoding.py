"""
bdface test suite
tests for charset resolution
"""

import unittest

import bdface
from bdface.encoding import get_charmap, to_codepoint, Charmap, EncodingName
from .base import BaseTester


class TestCharmaps(BaseTester):
    """Test charset identifier lookup and decoding."""

    def test_latin1(self):
        charmap = get_charmap('ISO8859-1')
        self.assertEqual(to_codepoint(charmap, 0xE9), ord('é'))

    def test_case_and_space_insensitive(self):
        self.assertEqual(get_charmap(' iso8859-1 '), get_charmap('ISO8859-1'))
        self.assertIsNotNone(get_charmap('Iso8859-15\n'))

    def test_latin2(self):
        charmap = get_charmap('ISO8859-2')
        # l with stroke
        self.assertEqual(charmap.codepoint(0xB3), 0x142)

    def test_latin9_euro(self):
        self.assertEqual(get_charmap('iso8859-15').codepoint(0xA4), 0x20AC)

    def test_latin5(self):
        # dotless i
        self.assertEqual(get_charmap('iso8859-9').codepoint(0xFD), 0x131)

    def test_koi8r(self):
        self.assertEqual(get_charmap('KOI8-R').codepoint(0xC1), 0x430)

    def test_undefined_byte(self):
        # 0xA5 is not defined in ISO 8859-3
        self.assertEqual(get_charmap('iso8859-3').codepoint(0xA5), 0xFFFD)

    def test_unknown_is_identity(self):
        self.assertIsNone(get_charmap('ISO10646-1'))
        self.assertIsNone(get_charmap('-'))
        self.assertIsNone(get_charmap(''))
        self.assertIsNone(get_charmap(None))
        self.assertEqual(to_codepoint(get_charmap('foo-bar'), 0xE9), 0xE9)
        self.assertEqual(to_codepoint(None, 0x263A), 0x263A)

    def test_out_of_range(self):
        self.assertEqual(get_charmap('iso8859-1').codepoint(0x141), 0x141)

    def test_callable(self):
        self.assertEqual(get_charmap('iso8859-1')(0x41), 0x41)

    def test_charmap_table_size(self):
        with self.assertRaises(ValueError):
            Charmap(range(128))
        self.assertEqual(len(get_charmap('iso8859-1')), 256)

    def test_encoding_name(self):
        self.assertEqual(EncodingName(' ISO8859-1'), 'iso8859-1')
        self.assertEqual(EncodingName('iso8859-1'), 'ISO8859-1 ')


class TestFontCharset(BaseTester):
    """Test charset use while parsing."""

    def test_declared_charset(self):
        self.assertEqual(self.font6x8.charset, 'ISO8859-1')
        self.assertEqual(self.font6x8.index[0xE9].name, 'eacute')

    def test_unicode_charset(self):
        self.assertEqual(self.grey.charset, 'ISO10646-1')
        self.assertEqual(self.grey.index[0x2212].name, 'ramp')

    def test_charset_override(self):
        font = bdface.parse(self.block_source.replace('ENCODING 65', 'ENCODING 163'))
        self.assertIn(163, font.index)
        font = bdface.parse(
            self.block_source.replace('ENCODING 65', 'ENCODING 163'),
            charset='KOI8-R',
        )
        self.assertEqual(font.charset, 'KOI8-R')
        self.assertIn(0x451, font.index)

    def test_default_char_resolved(self):
        source = self.block_source.replace(
            'CHARS 1',
            'CHARSET_REGISTRY ISO8859\nCHARSET_ENCODING 15\nDEFAULT_CHAR 164\nCHARS 1'
        )
        font = bdface.parse(source)
        self.assertEqual(font.default_codepoint, 0x20AC)


if __name__ == '__main__':
    unittest.main()
