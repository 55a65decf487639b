"""Formatting rules, printer and entrypoints."""

from yangfmt.format.canonical_order import (
    LEAF_CANONICAL_ORDER,
    SORTED_BLOCKS,
    is_sorted,
    sort_statements,
)
from yangfmt.format.options import FormatConfig
from yangfmt.format.printer import print_tree, write_node
from yangfmt.format.rules import process_statements
from yangfmt.format.runner import (
    FormatRunResult,
    format_text,
    format_tree,
    format_yang,
    run_format,
)

__all__ = [
    "LEAF_CANONICAL_ORDER",
    "SORTED_BLOCKS",
    "FormatConfig",
    "FormatRunResult",
    "format_text",
    "format_tree",
    "format_yang",
    "is_sorted",
    "print_tree",
    "process_statements",
    "run_format",
    "sort_statements",
    "write_node",
]
