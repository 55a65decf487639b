"""Peekable token stream between the lexer and the parsers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from yangfmt.lexer import Token
from yangfmt.text import utf8_length


class TokenSource:
    """Single-token lookahead over a lazy token iterator.

    Lexer errors surface from `peek`/`bump` the first time the failing token
    is pulled.
    """

    def __init__(self, tokens: Iterable[Token], text: str) -> None:
        self._tokens: Iterator[Token] = iter(tokens)
        self._end_offset = utf8_length(text)
        self._peeked: Token | None = None
        self._exhausted = False

    @property
    def end_offset(self) -> int:
        """Byte offset just past the end of the input."""
        return self._end_offset

    def peek(self) -> Token | None:
        if self._peeked is None and not self._exhausted:
            self._peeked = next(self._tokens, None)
            if self._peeked is None:
                self._exhausted = True
        return self._peeked

    def bump(self) -> Token | None:
        token = self.peek()
        self._peeked = None
        return token
