"""Diagnostics and error types."""

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
from yangfmt.diagnostics.diagnostic import Diagnostic, Severity
from yangfmt.diagnostics.errors import (
    FormatError,
    InvalidConcatenationError,
    LexError,
    OutputError,
    ParseError,
    UnclosedBlockError,
    UnexpectedCharacterError,
    UnexpectedClosingBraceError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from yangfmt.diagnostics.report import has_errors

__all__ = [
    "FORMAT_OUTPUT_FAILED",
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNTERMINATED_COMMENT",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_INVALID_CONCATENATION",
    "PARSER_UNCLOSED_BLOCK",
    "PARSER_UNEXPECTED_CLOSING_BRACE",
    "PARSER_UNEXPECTED_END_OF_INPUT",
    "PARSER_UNEXPECTED_TOKEN",
    "Diagnostic",
    "DiagnosticSpec",
    "FormatError",
    "InvalidConcatenationError",
    "LexError",
    "OutputError",
    "ParseError",
    "Severity",
    "UnclosedBlockError",
    "UnexpectedCharacterError",
    "UnexpectedClosingBraceError",
    "UnexpectedEndOfInputError",
    "UnexpectedTokenError",
    "UnterminatedCommentError",
    "UnterminatedStringError",
    "has_errors",
]
