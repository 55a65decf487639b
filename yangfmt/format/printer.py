"""Writes a (formatted) syntax tree out as text."""

from __future__ import annotations

import io
from typing import Protocol

from yangfmt.ast import (
    Comment,
    Date,
    EmptyLine,
    Node,
    Number,
    Other,
    QuotedString,
    RootNode,
    Statement,
    StringConcatenation,
)
from yangfmt.format.options import FormatConfig


class TextSink(Protocol):
    def write(self, text: str, /) -> object: ...


def print_tree(root: RootNode, config: FormatConfig) -> str:
    out = io.StringIO()
    for node in root.children:
        write_node(out, node, config, 0)
    return out.getvalue()


def write_node(out: TextSink, node: Node, config: FormatConfig, depth: int) -> None:
    """Writes one node, including its trailing line break.

    Handles indentation and wrapping only. Node order, empty lines and
    comment placement are settled by the formatting rules beforehand.
    """
    match node:
        case Statement():
            _write_statement(out, node, config, depth)
        case Comment(text=text):
            out.write(f"{config.indent(depth)}{text}\n")
        case EmptyLine():
            out.write("\n")


def _write_statement(out: TextSink, statement: Statement, config: FormatConfig, depth: int) -> None:
    indent = config.indent(depth)
    line = indent + statement.keyword.text
    for comment in statement.keyword_comments:
        line += f" {comment}"
    out.write(line)

    if statement.value is not None:
        _write_value(out, statement, config, depth, len(line))
        _write_comments(out, statement.value_comments, config.indent(depth + 1))

    if statement.children is not None:
        out.write(" {")
        _write_comments(out, statement.post_comments, config.indent(depth + 1))
        out.write("\n")
        for child in statement.children:
            write_node(out, child, config, depth + 1)
        out.write(f"{indent}}}")
    else:
        out.write(";")
        _write_comments(out, statement.post_comments, indent)

    out.write("\n")


def _write_value(out: TextSink, statement: Statement, config: FormatConfig, depth: int, column: int) -> None:
    match statement.value:
        case QuotedString(text=text, is_multiline=True):
            _write_multiline_string(out, text, config, depth)
        case QuotedString(text=text) | Number(text=text) | Date(text=text) | Other(text=text):
            # Line length = keyword + space + value + terminator
            if column + len(text) + 2 > config.max_width:
                out.write(f"\n{config.indent(depth + 1)}{text}")
            else:
                out.write(f" {text}")
        case StringConcatenation(fragments=fragments):
            pad = " " * max(len(statement.keyword.text) - 2, 0)
            comment_indent = config.indent(depth + 1)

            first, *rest = fragments
            out.write(f" {first.text}")
            _write_comments(out, first.comments, comment_indent)

            # Following fragments line up under the first one
            for fragment in rest:
                out.write(f"\n{config.indent(depth)}{pad} + {fragment.text}")
                _write_comments(out, fragment.comments, comment_indent)


def _write_multiline_string(out: TextSink, text: str, config: FormatConfig, depth: int) -> None:
    first, *rest = text.split("\n")
    out.write(f"\n{config.indent(depth + 1)}{first}")

    # Continuation lines start right after the opening quote
    continuation = config.indent(depth + 1) + " "
    for line in rest:
        out.write(f"\n{continuation}{line}" if line else "\n")


def _is_line_comment(comment: str) -> bool:
    return comment.startswith("//")


def _write_comments(out: TextSink, comments: list[str], overflow_indent: str) -> None:
    """Writes comments after the current line content.

    A `//` comment runs to the end of the line, so block comments go first
    and any line comment after the first one gets a line of its own.
    """
    if not comments:
        return

    block_comments = [c for c in comments if not _is_line_comment(c)]
    line_comments = [c for c in comments if _is_line_comment(c)]

    for comment in block_comments + line_comments[:1]:
        out.write(f" {comment}")
    for comment in line_comments[1:]:
        out.write(f"\n{overflow_indent}{comment}")
