"""Parses a single statement, with the comments that belong to it.

A statement is everything up to and including its terminating `;` or `{`,
plus any comments on the same line after the terminator. Those go into
`post_comments`, so a statement can be moved around without losing them.

Children are not parsed here: the returned flag tells the caller that the
statement opened a block, and that everything up to the matching `}` belongs
to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from yangfmt.ast import (
    NodeValue,
    QuotedString,
    Statement,
    StatementKeyword,
    StringConcatenation,
    StringFragment,
    value_from_token,
)
from yangfmt.diagnostics import (
    InvalidConcatenationError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
)
from yangfmt.lexer import Token, TokenKind
from yangfmt.parser.token_source import TokenSource

_SKIPPED = (TokenKind.WHITESPACE, TokenKind.LINE_BREAK)
_TERMINATORS = (TokenKind.SEMICOLON, TokenKind.OPEN_BLOCK)


class ParseState(Enum):
    CLEAN = auto()

    # After the keyword
    #
    #     module foo {
    #           ^
    GOT_KEYWORD = auto()

    # After the value
    #
    #     module foo {
    #               ^
    GOT_VALUE = auto()

    # Inside a `+` chain. Comments here belong to the last fragment, so a
    # concatenation never has value comments of its own.
    #
    #     pattern "foo" + "bar";
    #                    ^
    GOT_STRING_CONCAT = auto()

    # After the `;` or `{`, looking for same-line comments
    #
    #     description "foo";
    #                       ^
    GOT_STATEMENT = auto()


class PlusState(Enum):
    BEFORE_PLUS = auto()
    AFTER_PLUS = auto()


@dataclass(slots=True)
class _Pending:
    """Statement parts collected so far."""

    keyword: str = ""
    keyword_comments: list[str] = field(default_factory=list)
    value: NodeValue | None = None
    value_comments: list[str] = field(default_factory=list)
    fragments: list[StringFragment] = field(default_factory=list)
    plus_state: PlusState = PlusState.AFTER_PLUS
    opens_block: bool = False

    def finish(self, post_comments: list[str]) -> Statement:
        value = StringConcatenation(self.fragments) if self.fragments else self.value
        return Statement(
            keyword=StatementKeyword.from_text(self.keyword),
            keyword_comments=self.keyword_comments,
            value=value,
            value_comments=self.value_comments,
            post_comments=post_comments,
        )


def parse_statement(source: TokenSource) -> tuple[Statement, bool]:
    """Consume one statement from the token source.

    Returns the statement and whether it opens a block. Raises a ParseError
    subclass on any token the current state can't accept.
    """
    state = ParseState.CLEAN
    pending = _Pending()

    while state is not ParseState.GOT_STATEMENT:
        token = source.bump()
        if token is None:
            raise UnexpectedEndOfInputError(source.end_offset)

        match state:
            case ParseState.CLEAN:
                state = _on_clean(token, pending)
            case ParseState.GOT_KEYWORD:
                state = _on_keyword(token, pending)
            case ParseState.GOT_VALUE:
                state = _on_value(token, pending)
            case ParseState.GOT_STRING_CONCAT:
                state = _on_string_concat(token, pending)

    post_comments: list[str] = []
    while (token := source.peek()) is not None:
        if token.kind == TokenKind.WHITESPACE:
            source.bump()
        elif token.kind == TokenKind.COMMENT:
            post_comments.append(token.text)
            source.bump()
        else:
            break

    return pending.finish(post_comments), pending.opens_block


def _on_clean(token: Token, pending: _Pending) -> ParseState:
    if token.kind != TokenKind.OTHER:
        raise UnexpectedTokenError(token.start, token.text, "expected a statement keyword")
    pending.keyword = token.text
    return ParseState.GOT_KEYWORD


def _on_keyword(token: Token, pending: _Pending) -> ParseState:
    if token.kind in _SKIPPED:
        return ParseState.GOT_KEYWORD
    if token.kind == TokenKind.COMMENT:
        pending.keyword_comments.append(token.text)
        return ParseState.GOT_KEYWORD
    if token.kind in _TERMINATORS:
        return _terminate(token, pending)

    # Any other token is the value, even a `}` or `+`
    pending.value = value_from_token(token)
    return ParseState.GOT_VALUE


def _on_value(token: Token, pending: _Pending) -> ParseState:
    if token.kind in _SKIPPED:
        return ParseState.GOT_VALUE
    if token.kind == TokenKind.COMMENT:
        pending.value_comments.append(token.text)
        return ParseState.GOT_VALUE
    if token.kind in _TERMINATORS:
        return _terminate(token, pending)
    if token.kind == TokenKind.PLUS:
        if not isinstance(pending.value, QuotedString):
            raise InvalidConcatenationError(token.start)
        pending.fragments.append(StringFragment(pending.value.text, pending.value_comments))
        pending.value = None
        pending.value_comments = []
        pending.plus_state = PlusState.AFTER_PLUS
        return ParseState.GOT_STRING_CONCAT

    raise UnexpectedTokenError(token.start, token.text, "expected ';' or '{' after the value")


def _on_string_concat(token: Token, pending: _Pending) -> ParseState:
    if token.kind in _SKIPPED:
        return ParseState.GOT_STRING_CONCAT
    if token.kind == TokenKind.COMMENT:
        pending.fragments[-1].comments.append(token.text)
        return ParseState.GOT_STRING_CONCAT

    match pending.plus_state:
        case PlusState.BEFORE_PLUS:
            if token.kind == TokenKind.PLUS:
                pending.plus_state = PlusState.AFTER_PLUS
                return ParseState.GOT_STRING_CONCAT
            if token.kind in _TERMINATORS:
                return _terminate(token, pending)
            raise UnexpectedTokenError(token.start, token.text, "expected '+', ';' or '{'")
        case PlusState.AFTER_PLUS:
            if token.kind == TokenKind.STRING:
                pending.fragments.append(StringFragment(token.text))
                pending.plus_state = PlusState.BEFORE_PLUS
                return ParseState.GOT_STRING_CONCAT
            raise InvalidConcatenationError(token.start)


def _terminate(token: Token, pending: _Pending) -> ParseState:
    pending.opens_block = token.kind == TokenKind.OPEN_BLOCK
    return ParseState.GOT_STATEMENT
