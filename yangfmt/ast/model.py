"""Syntax tree data model.

The tree is concrete enough to reproduce every comment and blank line of the
source, but not whitespace. Nodes are plain mutable dataclasses so that the
formatting passes can rewrite them in place; every node is owned by exactly
one sibling list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias

from yangfmt.ast.keywords import EXTENSION_KEYWORD_PATTERN, STATEMENT_KEYWORDS
from yangfmt.lexer import Token, TokenKind


class KeywordKind(StrEnum):
    RECOGNIZED = "recognized"
    EXTENSION = "extension"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class StatementKeyword:
    """Statement keyword, tagged by whether it is a known statement.

    Unknown keywords are kept as INVALID rather than rejected, so malformed
    but structurally sound input can still be formatted.
    """

    kind: KeywordKind
    text: str

    @staticmethod
    def from_text(text: str) -> StatementKeyword:
        if text in STATEMENT_KEYWORDS:
            return StatementKeyword(KeywordKind.RECOGNIZED, text)
        if EXTENSION_KEYWORD_PATTERN.fullmatch(text):
            return StatementKeyword(KeywordKind.EXTENSION, text)
        return StatementKeyword(KeywordKind.INVALID, text)


@dataclass(slots=True)
class QuotedString:
    """Quoted string value, quote characters included."""

    text: str

    @property
    def quote(self) -> str:
        return self.text[0]

    @property
    def inner(self) -> str:
        return self.text[1:-1]

    @property
    def is_multiline(self) -> bool:
        return "\n" in self.text


@dataclass(slots=True)
class StringFragment:
    """One quoted segment of a `+` concatenation and the comments after it."""

    text: str
    comments: list[str] = field(default_factory=list)


@dataclass(slots=True)
class StringConcatenation:
    fragments: list[StringFragment]


@dataclass(slots=True)
class Number:
    text: str


@dataclass(slots=True)
class Date:
    text: str


@dataclass(slots=True)
class Other:
    """Any value not identifiable as a quoted string, number or date."""

    text: str


NodeValue: TypeAlias = QuotedString | StringConcatenation | Number | Date | Other


def value_from_token(token: Token) -> NodeValue:
    match token.kind:
        case TokenKind.STRING:
            return QuotedString(token.text)
        case TokenKind.NUMBER:
            return Number(token.text)
        case TokenKind.DATE:
            return Date(token.text)
        case _:
            return Other(token.text)


@dataclass(slots=True)
class Statement:
    keyword: StatementKeyword
    # Comment(s) between the keyword and the value (or terminator)
    keyword_comments: list[str] = field(default_factory=list)
    value: NodeValue | None = None
    # Comment(s) between the value and the terminator
    value_comments: list[str] = field(default_factory=list)
    # None for `;` statements, a (possibly empty) list for blocks
    children: list[Node] | None = None
    # Comment(s) after the `;` or `{`, on the same line
    post_comments: list[str] = field(default_factory=list)

    @staticmethod
    def new(keyword: str, **fields) -> Statement:
        return Statement(StatementKeyword.from_text(keyword), **fields)

    @property
    def is_block(self) -> bool:
        return self.children is not None


@dataclass(slots=True)
class Comment:
    text: str


@dataclass(slots=True)
class EmptyLine:
    text: str = "\n"


Node: TypeAlias = Statement | Comment | EmptyLine


@dataclass(slots=True)
class RootNode:
    """Virtual top-level block holding the module and any comments around it."""

    children: list[Node] = field(default_factory=list)
