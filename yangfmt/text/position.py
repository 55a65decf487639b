"""1-based line/column positions for presenting offsets to humans."""

from dataclasses import dataclass

from yangfmt.text.text import encode_source


@dataclass(frozen=True, slots=True)
class TextPosition:
    """1-based cursor position in a text file.

    Columns count bytes, like the offsets they are computed from.
    """

    line: int
    col: int

    @staticmethod
    def from_offset(buffer: bytes | str, offset: int) -> "TextPosition":
        prefix = encode_source(buffer)[:offset]
        line = prefix.count(b"\n") + 1
        col = offset - (prefix.rfind(b"\n") + 1) + 1
        return TextPosition(line, col)

    def __str__(self) -> str:
        return f"line {self.line} col {self.col}"
