"""Statement parser and tree builder."""

from yangfmt.parser.parser import parse, parse_tokens
from yangfmt.parser.statement import ParseState, PlusState, parse_statement
from yangfmt.parser.token_source import TokenSource

__all__ = [
    "ParseState",
    "PlusState",
    "TokenSource",
    "parse",
    "parse_statement",
    "parse_tokens",
]
