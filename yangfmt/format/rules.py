"""Tree rewrite passes applied before printing.

Passes run bottom-up: a statement's children are processed before the
statement itself, then the sibling list as a whole is cleaned up.
"""

from __future__ import annotations

import textwrap

from yangfmt.ast import EmptyLine, Node, QuotedString, Statement, StringConcatenation
from yangfmt.format.canonical_order import sort_statements
from yangfmt.format.options import FormatConfig


def process_statements(parent_keyword: str | None, nodes: list[Node], config: FormatConfig) -> None:
    """Apply all formatting rules to the list, recursing into blocks."""
    for node in nodes:
        if not isinstance(node, Statement):
            continue

        if node.children is not None:
            process_statements(node.keyword.text, node.children, config)

        convert_to_double_quotes(node)
        strip_string(node)
        dedent_multiline_string(node)
        relocate_comments(node)

    trim_empty_lines(nodes)
    squash_empty_lines(nodes)

    if config.canonical_order:
        sort_statements(parent_keyword, nodes)


def _double_quoted(text: str) -> str:
    inner = text[1:-1]
    if text[0] != "'" or '"' in inner:
        return text
    return f'"{inner}"'


def convert_to_double_quotes(statement: Statement) -> None:
    """Converts single-quoted strings to double-quoted strings.

    Strings containing a double quote keep their single quotes.
    """
    match statement.value:
        case QuotedString() as value:
            value.text = _double_quoted(value.text)
        case StringConcatenation(fragments=fragments):
            for fragment in fragments:
                fragment.text = _double_quoted(fragment.text)


def strip_string(statement: Statement) -> None:
    """Strips leading and trailing whitespace inside a quoted value.

    A value that is only whitespace becomes an empty string. Trailing
    whitespace is kept if removing it would leave a backslash right before
    the closing quote.
    """
    value = statement.value
    if not isinstance(value, QuotedString):
        return

    stripped = value.inner.strip()
    if stripped.endswith("\\"):
        stripped = value.inner.lstrip()
    value.text = f"{value.quote}{stripped}{value.quote}"


def dedent_multiline_string(statement: Statement) -> None:
    """Dedents every line but the first of a multi-line quoted value.

    Continuation lines are indented to match the original context, which
    the printer recomputes anyway. The first line usually sits right after
    the opening quote, so it's left out of the dedent.

    Assumes the string was already stripped.
    """
    value = statement.value
    if not isinstance(value, QuotedString):
        return

    lines = [line.removesuffix("\r") for line in value.inner.split("\n")]
    if len(lines) < 2:
        return

    rest = textwrap.dedent("\n".join(lines[1:]))
    value.text = f"{value.quote}{lines[0]}\n{rest}{value.quote}"


def relocate_comments(statement: Statement) -> None:
    """Moves keyword and value comments to the end of the statement line.

    Comments after the last fragment of a concatenation count as value
    comments, since nothing but the terminator follows them.
    """
    relocated = [*statement.keyword_comments, *statement.value_comments]
    if isinstance(statement.value, StringConcatenation):
        last = statement.value.fragments[-1]
        relocated.extend(last.comments)
        last.comments = []

    statement.keyword_comments = []
    statement.value_comments = []
    statement.post_comments = relocated + statement.post_comments


def trim_empty_lines(nodes: list[Node]) -> None:
    """Removes leading and trailing empty lines from the list.

    Essentially converts:

        foo {

            bar "Test";


        }

    Into:

        foo {
            bar "Test";
        }
    """
    while nodes and isinstance(nodes[0], EmptyLine):
        del nodes[0]
    while nodes and isinstance(nodes[-1], EmptyLine):
        nodes.pop()


def squash_empty_lines(nodes: list[Node]) -> None:
    """Collapses runs of empty lines into a single empty line."""
    i = 1
    while i < len(nodes):
        if isinstance(nodes[i], EmptyLine) and isinstance(nodes[i - 1], EmptyLine):
            del nodes[i]
            continue
        i += 1
