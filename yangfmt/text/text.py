from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in the input, as UTF-8 byte offsets.

    Invariant:
    - 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: int) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset, offset)

    def len(self) -> int:
        """Get the length of the range."""
        return self.end - self.start

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


def utf8_length(text: str) -> int:
    """Number of bytes the text takes up in the UTF-8 input."""
    return len(text.encode("utf-8", "surrogatepass"))


def encode_source(buffer: bytes | str) -> bytes:
    if isinstance(buffer, str):
        return buffer.encode("utf-8", "surrogatepass")
    return bytes(buffer)


def decode_source(buffer: bytes | str) -> str:
    """Decode an input buffer as UTF-8, passing text through untouched.

    Raises UnicodeDecodeError on invalid input; callers turn that into a
    positional lexer error.
    """
    if isinstance(buffer, str):
        return buffer
    return bytes(buffer).decode("utf-8")
