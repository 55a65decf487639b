"""YANG source auto-formatter."""

from yangfmt.ast import RootNode, dump_tree
from yangfmt.diagnostics import FormatError, LexError, ParseError
from yangfmt.format import FormatConfig, FormatRunResult, format_text, format_yang, run_format
from yangfmt.lexer import Token, TokenKind, dump_tokens, scan
from yangfmt.parser import parse

__all__ = [
    "FormatConfig",
    "FormatError",
    "FormatRunResult",
    "LexError",
    "ParseError",
    "RootNode",
    "Token",
    "TokenKind",
    "dump_tokens",
    "dump_tree",
    "format_text",
    "format_yang",
    "parse",
    "run_format",
    "scan",
]
