"""Formatting entrypoints over a single parse."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from yangfmt.ast import RootNode
from yangfmt.diagnostics import Diagnostic, OutputError, ParseError, has_errors
from yangfmt.format.options import FormatConfig
from yangfmt.format.printer import TextSink, print_tree
from yangfmt.format.rules import process_statements
from yangfmt.parser import parse

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting one input without raising on parse errors."""

    source_text: str
    formatted_text: str
    diagnostics: list[Diagnostic]
    changed: bool

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


def format_tree(root: RootNode, config: FormatConfig) -> RootNode:
    """Apply the formatting rules to the tree in place."""
    process_statements(None, root.children, config)
    return root


def format_text(buffer: bytes | str, config: FormatConfig | None = None) -> str:
    config = config or FormatConfig()
    tree = parse(buffer)
    logger.debug("Parsed %d top-level nodes", len(tree.children))
    return print_tree(format_tree(tree, config), config)


def format_yang(out: TextSink, buffer: bytes | str, config: FormatConfig | None = None) -> None:
    """Formats the input buffer into the given output sink.

    Nothing is written if the input fails to parse.
    """
    text = format_text(buffer, config)
    try:
        out.write(text)
    except OSError as exc:
        raise OutputError(f"I/O error: {exc}") from exc


def run_format(buffer: bytes | str, config: FormatConfig | None = None) -> FormatRunResult:
    """Run formatting, reporting parse errors as diagnostics."""
    source = buffer if isinstance(buffer, str) else bytes(buffer).decode("utf-8", errors="replace")

    try:
        formatted = format_text(buffer, config)
    except ParseError as error:
        logger.debug("Formatting failed: %s", error)
        return FormatRunResult(
            source_text=source,
            formatted_text=source,
            diagnostics=[error.to_diagnostic()],
            changed=False,
        )

    return FormatRunResult(
        source_text=source,
        formatted_text=formatted,
        diagnostics=[],
        changed=formatted != source,
    )
