"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum

from yangfmt.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Trivia tokens
    # -------------------------
    WHITESPACE = 10
    LINE_BREAK = 11
    COMMENT = 12

    # -------------------------
    # Values
    # -------------------------
    STRING = 20  # single- or double-quoted, quotes included
    NUMBER = 21
    DATE = 22
    OTHER = 23  # keywords, identifiers, unquoted strings

    # -------------------------
    # Punctuation
    # -------------------------
    SEMICOLON = 30  # ;
    PLUS = 31  # +
    OPEN_BLOCK = 32  # {
    CLOSE_BLOCK = 33  # }

    @property
    def is_trivia(self) -> bool:
        return self in (
            TokenKind.WHITESPACE,
            TokenKind.LINE_BREAK,
            TokenKind.COMMENT,
        )


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    range: TextRange
    text: str

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def span(self) -> tuple[int, int]:
        """(start, end) with an inclusive end offset."""
        return (self.range.start, self.range.end - 1)
