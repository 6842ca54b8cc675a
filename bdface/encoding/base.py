"""
bdface.encoding.base - base classes and functions for encoding

(c) 2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


class EncodingName(str):
    """Charset identifier, compared case-insensitively and trimmed."""

    def __new__(cls, value=''):
        """Convert value to encoding name."""
        return super().__new__(cls, str(value).strip().lower())

    def __eq__(self, other):
        """Check if two names match."""
        return str.__eq__(self, EncodingName(other))

    def __hash__(self):
        return str.__hash__(self)


class Encoder:
    """
    Convert single-byte codes to code points.
    Subclasses implement `codepoint`; calling the encoder is the same.
    """

    def __init__(self, name):
        """Set encoder name."""
        self.name = EncodingName(name)

    def codepoint(self, code):
        """Convert raw code to code point."""
        raise NotImplementedError

    def __call__(self, code):
        return self.codepoint(code)

    def __repr__(self):
        """Representation."""
        return f"{type(self).__name__}(name='{self.name}')"
