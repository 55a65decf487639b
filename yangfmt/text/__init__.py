"""Text offsets and positions."""

from yangfmt.text.position import TextPosition
from yangfmt.text.text import TextRange, decode_source, encode_source, utf8_length

__all__ = [
    "TextPosition",
    "TextRange",
    "decode_source",
    "encode_source",
    "utf8_length",
]
