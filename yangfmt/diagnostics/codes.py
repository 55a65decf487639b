"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with the same quote character it was opened with.",
    category="lexer",
)

LEXER_UNTERMINATED_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_COMMENT",
    message="Unterminated block comment.",
    hint="Close the comment with `*/`.",
    category="lexer",
)

LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character",
    category="lexer",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
    category="parser",
)

PARSER_UNEXPECTED_END_OF_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_END_OF_INPUT",
    message="Unexpected end of input",
    hint="Terminate the statement with `;` or open a block with `{`.",
    category="parser",
)

PARSER_UNEXPECTED_CLOSING_BRACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_CLOSING_BRACE",
    message="Unexpected closing curly brace",
    category="parser",
)

PARSER_UNCLOSED_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNCLOSED_BLOCK",
    message="Unclosed block at end of file",
    hint="Add the missing `}`.",
    category="parser",
)

PARSER_INVALID_CONCATENATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_CONCATENATION",
    message="Can only concatenate strings",
    category="parser",
)

FORMAT_OUTPUT_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="FORMAT_OUTPUT_FAILED",
    message="I/O error while writing formatted output",
    category="format",
)
