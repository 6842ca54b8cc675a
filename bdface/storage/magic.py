"""
bdface.storage.magic - file format errors

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


class FileFormatError(Exception):
    """Incorrect file format."""

    def __init__(self, message, lineno=None, line=None):
        self.message = message
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            message = f'line {lineno}: {message}'
            if line is not None:
                message = f'{message} [{line.strip()!r}]'
        super().__init__(message)


class MalformedLine(FileFormatError):
    """Known keyword with missing or non-integer values, or out of place."""


class GlyphCountMismatch(FileFormatError):
    """Number of glyph blocks does not match the CHARS declaration."""


class MalformedBitmapRow(FileFormatError):
    """Bitmap row that is not hex or too short for the glyph width."""


class UnterminatedGlyph(FileFormatError):
    """Glyph block without ENDCHAR."""
