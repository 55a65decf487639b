"""Lexer.

Breaks source text up into a small set of tokens. Whitespace, line breaks
and comments are tokens too, so the token stream covers every byte of
the input:

- STRING: any single- or double-quoted string
- DATE: NNNN-NN-NN
- NUMBER: an integer or decimal value
- COMMENT: a `//` line comment or a `/* */` block comment
- OPEN_BLOCK, CLOSE_BLOCK, SEMICOLON, PLUS
- OTHER: anything else, including keywords, booleans and unquoted strings
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from yangfmt.diagnostics import (
    LexError,
    UnexpectedCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from yangfmt.lexer.tokens import Token, TokenKind
from yangfmt.text import TextRange, decode_source, utf8_length

NUMBER_PATTERN = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?")
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

DELIMITERS = frozenset(" \t\r\n;{}")

_PUNCTUATION = {
    ";": TokenKind.SEMICOLON,
    "+": TokenKind.PLUS,
    "{": TokenKind.OPEN_BLOCK,
    "}": TokenKind.CLOSE_BLOCK,
}


class Lexer:
    """Lossless lexer that emits trivia and non-trivia tokens.

    Scanning walks the decoded text, but token ranges and error positions are
    UTF-8 byte offsets into the input. Every error is raised at the start of
    the token being scanned, so only token boundaries need converting.

    Lexing errors are fatal: the first one is raised and the lexer is left
    exhausted.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._byte_position = 0
        self._failed = False

    @property
    def is_eof(self) -> bool:
        return self._failed or self._position >= len(self._source)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def next_token(self) -> Token | None:
        """Scan the token at the current position, None at end of input."""
        if self.is_eof:
            return None

        start = self._position
        try:
            kind = self._lex_token()
        except LexError:
            self._failed = True
            raise

        text = self._source[start : self._position]
        byte_start = self._byte_position
        self._byte_position += utf8_length(text)
        return Token(kind, TextRange(byte_start, self._byte_position), text)

    def lex(self) -> list[Token]:
        return list(self)

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        punctuation = _PUNCTUATION.get(ch)
        if punctuation is not None:
            self._advance(1)
            return punctuation

        if ch == " " or ch == "\t":
            self._consume_whitespaces()
            return TokenKind.WHITESPACE

        if self._consume_line_break():
            return TokenKind.LINE_BREAK

        if ch == '"' or ch == "'":
            return self._lex_string(ch)

        if ch == "/" and self._peek_char() == "/":
            return self._lex_line_comment()

        if ch == "/" and self._peek_char() == "*":
            return self._lex_block_comment()

        if ch not in DELIMITERS:
            return self._lex_other()

        # Only a lone carriage return gets this far
        raise UnexpectedCharacterError(self._byte_position, ch)

    def _lex_string(self, quote: str) -> TokenKind:
        self._advance(1)
        prev = ""

        while not self._at_end():
            ch = self._current_char()
            self._advance(1)
            if ch == quote and prev != "\\":
                return TokenKind.STRING
            prev = ch

        raise UnterminatedStringError(self._byte_position)

    def _lex_line_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the line break itself.
        self._advance(2)
        while not self._at_end():
            ch = self._current_char()
            if ch == "\n" or (ch == "\r" and self._peek_char() == "\n"):
                break
            self._advance(1)
        return TokenKind.COMMENT

    def _lex_block_comment(self) -> TokenKind:
        start = self._position
        end = self._source.find("*/", start + 2)
        if end == -1:
            raise UnterminatedCommentError(self._byte_position)
        self._position = end + 2
        return TokenKind.COMMENT

    def _lex_other(self) -> TokenKind:
        start = self._position
        while not self._at_end() and self._current_char() not in DELIMITERS:
            self._advance(1)

        text = self._source[start : self._position]
        if NUMBER_PATTERN.fullmatch(text):
            return TokenKind.NUMBER
        if DATE_PATTERN.fullmatch(text):
            return TokenKind.DATE
        return TokenKind.OTHER

    def _consume_whitespaces(self) -> None:
        while not self._at_end():
            ch = self._current_char()
            if ch == " " or ch == "\t":
                self._advance(1)
                continue
            break

    def _consume_line_break(self) -> bool:
        if self._current_char() == "\n":
            self._advance(1)
            return True
        if self._current_char() == "\r" and self._peek_char() == "\n":
            self._advance(2)
            return True
        return False

    def _at_end(self) -> bool:
        return self._position >= len(self._source)

    def _current_char(self) -> str:
        if self._at_end():
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def source_text(buffer: bytes | str) -> str:
    """Decode the input buffer, reporting invalid UTF-8 as a lexer error."""
    try:
        return decode_source(buffer)
    except UnicodeDecodeError as exc:
        bad = bytes(buffer)[exc.start : exc.start + 1]
        raise UnexpectedCharacterError(exc.start, bad.decode("latin-1")) from exc


def scan(buffer: bytes | str) -> Iterator[Token]:
    """Lazily scan the buffer into tokens, starting at offset 0."""
    return iter(Lexer(source_text(buffer)))


def dump_tokens(tokens: list[Token]) -> str:
    """Render tokens as a human readable table for troubleshooting."""
    lines: list[str] = []
    for tok in tokens:
        start, end = tok.span
        lines.append(f"{tok.kind.name:<20} {f'{start} -> {end}':<15} {tok.text!r}")
    return "\n".join(lines) + "\n" if lines else ""
