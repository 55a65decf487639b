"""Lexer."""

from yangfmt.lexer.lexer import (
    DATE_PATTERN,
    NUMBER_PATTERN,
    Lexer,
    dump_tokens,
    scan,
    source_text,
)
from yangfmt.lexer.tokens import Token, TokenKind

__all__ = [
    "DATE_PATTERN",
    "NUMBER_PATTERN",
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "scan",
    "source_text",
]
