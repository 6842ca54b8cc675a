"""
bdface.encoding - charset resolution

(c) 2020--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .base import Encoder, EncodingName
from .charmaps import Charmap, get_charmap, to_codepoint
