"""
bdface.encoding.charmaps - single-byte character maps

(c) 2020--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from types import MappingProxyType

from .base import Encoder, EncodingName


# replacement character for bytes a charset leaves undefined
REPLACEMENT = 0xFFFD


class Charmap(Encoder):
    """Convert between bytes and code points using a stored 256-entry table."""

    def __init__(self, table, *, name=''):
        """Create charmap from a sequence of 256 code points."""
        super().__init__(name)
        table = tuple(table)
        if len(table) != 256:
            raise ValueError('Single-byte charmap must have 256 entries.')
        self._table = table

    @classmethod
    def from_codec(cls, codec, *, name=''):
        """Build table from a Python single-byte codec."""
        chars = bytes(range(256)).decode(codec, errors='replace')
        return cls((ord(_c) for _c in chars), name=name or codec)

    def codepoint(self, code):
        """Convert byte value to code point; out-of-range values are kept."""
        if 0 <= code < 256:
            return self._table[code]
        logging.debug(
            'Code %d out of range for charset `%s`; using as is.',
            code, self.name
        )
        return code

    def __len__(self):
        """Number of defined codepoints."""
        return sum(_cp != REPLACEMENT for _cp in self._table)

    def __eq__(self, other):
        """Compare to other Charmap."""
        return isinstance(other, Charmap) and (self._table == other._table)

    def __hash__(self):
        return hash(self._table)


# charset identifier (XLFD registry-encoding) -> python codec
_CHARSET_CODECS = (
    ('iso8859-1', 'latin-1'),
    ('iso8859-2', 'iso8859-2'),
    ('iso8859-3', 'iso8859-3'),
    ('iso8859-4', 'iso8859-4'),
    ('iso8859-5', 'iso8859-5'),
    ('iso8859-6', 'iso8859-6'),
    ('iso8859-7', 'iso8859-7'),
    ('iso8859-8', 'iso8859-8'),
    ('iso8859-9', 'iso8859-9'),
    ('iso8859-10', 'iso8859-10'),
    ('iso8859-11', 'iso8859-11'),
    ('iso8859-13', 'iso8859-13'),
    ('iso8859-14', 'iso8859-14'),
    ('iso8859-15', 'iso8859-15'),
    ('iso8859-16', 'iso8859-16'),
    ('koi8-r', 'koi8-r'),
    ('koi8-u', 'koi8-u'),
    ('microsoft-cp1250', 'cp1250'),
    ('microsoft-cp1251', 'cp1251'),
    ('microsoft-cp1252', 'cp1252'),
    ('microsoft-cp1253', 'cp1253'),
    ('microsoft-cp1254', 'cp1254'),
    ('microsoft-cp1255', 'cp1255'),
    ('microsoft-cp1256', 'cp1256'),
    ('microsoft-cp1257', 'cp1257'),
    ('microsoft-cp1258', 'cp1258'),
)

charmaps = MappingProxyType({
    EncodingName(_name): Charmap.from_codec(_codec, name=_name)
    for _name, _codec in _CHARSET_CODECS
})


def get_charmap(charset):
    """
    Get the charmap for a charset identifier such as `ISO8859-1`.
    Returns None if the charset is not known, meaning raw codes are code points.
    """
    return charmaps.get(EncodingName(charset or ''))


def to_codepoint(charmap, code):
    """Resolve a raw code through a charmap, or use as is if there is none."""
    if charmap is None:
        return code
    return charmap.codepoint(code)
