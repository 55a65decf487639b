"""Syntax tree model."""

from yangfmt.ast.dump import dump_tree, keyword_label, value_label
from yangfmt.ast.keywords import EXTENSION_KEYWORD_PATTERN, STATEMENT_KEYWORDS
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
    StringFragment,
    value_from_token,
)

__all__ = [
    "EXTENSION_KEYWORD_PATTERN",
    "STATEMENT_KEYWORDS",
    "Comment",
    "Date",
    "EmptyLine",
    "KeywordKind",
    "Node",
    "NodeValue",
    "Number",
    "Other",
    "QuotedString",
    "RootNode",
    "Statement",
    "StatementKeyword",
    "StringConcatenation",
    "StringFragment",
    "dump_tree",
    "keyword_label",
    "value_label",
    "value_from_token",
]
