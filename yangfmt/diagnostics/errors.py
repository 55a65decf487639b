"""Exception hierarchy for the formatting pipeline.

Every error carries the UTF-8 byte offset it was raised at. Nothing in the
core converts offsets to line/column; the CLI does that for display.
"""

from __future__ import annotations

from yangfmt.diagnostics.codes import (
    FORMAT_OUTPUT_FAILED,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_COMMENT,
    LEXER_UNTERMINATED_STRING,
    PARSER_INVALID_CONCATENATION,
    PARSER_UNCLOSED_BLOCK,
    PARSER_UNEXPECTED_CLOSING_BRACE,
    PARSER_UNEXPECTED_END_OF_INPUT,
    PARSER_UNEXPECTED_TOKEN,
    DiagnosticSpec,
)
from yangfmt.diagnostics.diagnostic import Diagnostic
from yangfmt.text import TextRange


class FormatError(Exception):
    """Base class for everything that can abort a format invocation."""

    spec: DiagnosticSpec = FORMAT_OUTPUT_FAILED

    def __init__(self, message: str | None = None, position: int = 0) -> None:
        self.message = message or self.spec.message
        self.position = position
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return self.spec.code

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(
            code=self.spec.code,
            message=self.message,
            range=TextRange.empty(self.position),
            severity=self.spec.severity,
            hint=self.spec.hint,
            category=self.spec.category,
        )


class OutputError(FormatError):
    """Writing to the output sink failed."""


class ParseError(FormatError):
    """The input could not be turned into a syntax tree."""


class LexError(ParseError):
    """The input could not be split into tokens."""


class UnterminatedStringError(LexError):
    spec = LEXER_UNTERMINATED_STRING

    def __init__(self, start: int) -> None:
        super().__init__(f"String starting at {start} was never terminated", start)
        self.start = start


class UnterminatedCommentError(LexError):
    spec = LEXER_UNTERMINATED_COMMENT

    def __init__(self, start: int) -> None:
        super().__init__(f"Block comment starting at {start} was never terminated", start)
        self.start = start


class UnexpectedCharacterError(LexError):
    spec = LEXER_UNEXPECTED_CHARACTER

    def __init__(self, position: int, char: str) -> None:
        super().__init__(f"Unexpected character at position {position}: {char!r}", position)
        self.char = char


class UnexpectedTokenError(ParseError):
    spec = PARSER_UNEXPECTED_TOKEN

    def __init__(self, position: int, found: str, context: str) -> None:
        super().__init__(f"Unexpected token {found!r}, {context}", position)
        self.found = found
        self.context = context


class UnexpectedEndOfInputError(ParseError):
    spec = PARSER_UNEXPECTED_END_OF_INPUT

    def __init__(self, position: int) -> None:
        super().__init__(position=position)


class UnexpectedClosingBraceError(ParseError):
    spec = PARSER_UNEXPECTED_CLOSING_BRACE

    def __init__(self, position: int) -> None:
        super().__init__(position=position)


class UnclosedBlockError(ParseError):
    spec = PARSER_UNCLOSED_BLOCK

    def __init__(self, position: int) -> None:
        super().__init__(position=position)


class InvalidConcatenationError(ParseError):
    spec = PARSER_INVALID_CONCATENATION

    def __init__(self, position: int) -> None:
        super().__init__(position=position)
