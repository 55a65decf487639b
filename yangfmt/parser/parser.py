"""Builds the syntax tree from a token stream.

Block nesting is tracked with an explicit stack of sibling lists rather than
recursion, so nesting depth is not limited by the Python call stack.
"""

from __future__ import annotations

from yangfmt.ast import Comment, EmptyLine, Node, RootNode
from yangfmt.diagnostics import UnclosedBlockError, UnexpectedClosingBraceError
from yangfmt.lexer import Lexer, TokenKind, source_text
from yangfmt.parser.statement import parse_statement
from yangfmt.parser.token_source import TokenSource


def parse(buffer: bytes | str) -> RootNode:
    """Parse the input into a syntax tree rooted at a virtual block.

    The grammar is not strictly enforced: several modules, or no module at
    all, parse just fine. Only the block structure and statement shape must
    be sound.
    """
    text = source_text(buffer)
    return parse_tokens(TokenSource(Lexer(text), text))


def parse_tokens(source: TokenSource) -> RootNode:
    node_stack: list[list[Node]] = [[]]
    prev_token_was_line_break = False
    prev_token_pos = 0

    while (token := source.peek()) is not None:
        nodes = node_stack[-1]
        token_pos = token.start

        match token.kind:
            case TokenKind.WHITESPACE:
                source.bump()

            case TokenKind.LINE_BREAK:
                if prev_token_was_line_break:
                    nodes.append(EmptyLine(token.text))
                source.bump()

            case TokenKind.COMMENT:
                nodes.append(Comment(token.text))
                source.bump()

            case TokenKind.CLOSE_BLOCK:
                if len(node_stack) == 1:
                    raise UnexpectedClosingBraceError(token_pos)
                # The popped list is already owned by the statement that opened it
                node_stack.pop()
                source.bump()

            case _:
                statement, opens_block = parse_statement(source)
                nodes.append(statement)
                if opens_block:
                    statement.children = []
                    node_stack.append(statement.children)

        if token.kind == TokenKind.LINE_BREAK:
            prev_token_was_line_break = True
        elif token.kind != TokenKind.WHITESPACE:
            prev_token_was_line_break = False

        prev_token_pos = token_pos

    if len(node_stack) > 1:
        raise UnclosedBlockError(prev_token_pos)

    return RootNode(children=node_stack[0])
