"""Debug dump of syntax trees as an S-expression-like outline."""

from __future__ import annotations

from yangfmt.ast.model import (
    Comment,
    Date,
    EmptyLine,
    KeywordKind,
    Node,
    NodeValue,
    Number,
    Other,
    QuotedString,
    RootNode,
    Statement,
    StatementKeyword,
    StringConcatenation,
)

_KEYWORD_LABELS = {
    KeywordKind.RECOGNIZED: "Keyword",
    KeywordKind.EXTENSION: "ExtensionKeyword",
    KeywordKind.INVALID: "INVALID",
}


def dump_tree(root: RootNode) -> str:
    parts = ["(root"]
    for node in root.children:
        _dump_node(parts, node, 1)
    parts.append(")\n")
    return "".join(parts)


def keyword_label(keyword: StatementKeyword) -> str:
    escaped = keyword.text.replace("\\", "\\\\").replace('"', '\\"')
    return f'{_KEYWORD_LABELS[keyword.kind]} "{escaped}"'


def value_label(value: NodeValue) -> str:
    match value:
        case QuotedString():
            return "String"
        case StringConcatenation():
            return "StringConcatenation"
        case Number():
            return "Number"
        case Date():
            return "Date"
        case Other():
            return "Other"
    raise TypeError(f"Not a node value: {value!r}")


def _dump_node(parts: list[str], node: Node, depth: int) -> None:
    parts.append("\n" + "  " * depth)

    match node:
        case Statement():
            parts.append(f"({keyword_label(node.keyword)}")
            parts.extend(" <comment>" for _ in node.keyword_comments)
            if node.value is not None:
                parts.append(f" {value_label(node.value)}")
            parts.extend(" <comment>" for _ in node.value_comments)
            parts.extend(" <post-comment>" for _ in node.post_comments)
            for child in node.children or ():
                _dump_node(parts, child, depth + 1)
            parts.append(")")
        case EmptyLine():
            parts.append("[EmptyLine]")
        case Comment():
            parts.append("(comment)")
