"""Command-line front end: reads input, formats it, presents errors."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from tqdm import tqdm

from yangfmt.ast import dump_tree
from yangfmt.diagnostics import ParseError
from yangfmt.format import FormatConfig, run_format
from yangfmt.format.options import DEFAULT_INDENT_WIDTH, DEFAULT_MAX_WIDTH
from yangfmt.lexer import dump_tokens, scan
from yangfmt.parser import parse
from yangfmt.text import TextPosition

logger = logging.getLogger(__name__)

STDIN = "-"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yangfmt",
        description="YANG auto-formatter, inspired by the consistent style of IETF YANG models",
    )
    parser.add_argument(
        "-m",
        "--max-width",
        type=int,
        default=DEFAULT_MAX_WIDTH,
        help=f"Will try to wrap at this column (default: {DEFAULT_MAX_WIDTH})",
    )
    parser.add_argument(
        "-t",
        "--tab-width",
        type=int,
        default=DEFAULT_INDENT_WIDTH,
        help=f"Number of spaces used for indentation (default: {DEFAULT_INDENT_WIDTH})",
    )
    parser.add_argument(
        "-c",
        "--canonical-order",
        action="store_true",
        help="Sort statements to match canonical order",
    )
    parser.add_argument(
        "-i",
        "--in-place",
        action="store_true",
        help="Format files in-place rather than print to STDOUT (use with caution!)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Write nothing, exit with status 1 if any input would be reformatted",
    )
    parser.add_argument(
        "--lex",
        action="store_true",
        help="(debugging) Show raw lexer output rather than auto-formatting",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="(debugging) Show the syntax tree rather than auto-formatting",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar when formatting several files in-place",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "file_paths",
        nargs="*",
        metavar="FILE",
        help='Paths of the files to format (leave empty or use "-" for STDIN)',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    paths: list[str] = args.file_paths or [STDIN]

    if args.in_place and STDIN in paths:
        return _error("Can't modify STDIN in place")

    try:
        config = FormatConfig(
            indent_width=args.tab_width,
            max_width=args.max_width,
            canonical_order=args.canonical_order,
        )
    except ValueError as exc:
        return _error(str(exc))

    inputs: list[tuple[str, bytes]] = []
    for path in paths:
        try:
            inputs.append((path, _read_input(path)))
        except OSError as exc:
            return _error(f"Failed to read {path}: {exc}")

    if args.lex:
        return _dump(inputs, _lex_dump)
    if args.tree:
        return _dump(inputs, lambda buffer: dump_tree(parse(buffer)))

    show_progress = args.in_place and len(inputs) > 1 and not args.no_progress and sys.stderr.isatty()
    would_change: list[str] = []

    for path, buffer in tqdm(inputs, desc="yangfmt", unit="file", disable=not show_progress):
        logger.debug("Formatting %s (%d bytes)", path, len(buffer))
        result = run_format(buffer, config)

        if result.has_errors:
            diagnostic = result.diagnostics[0]
            position = TextPosition.from_offset(buffer, diagnostic.range.start)
            return _error(f"{_label(path)}Parse error at {position}: {diagnostic.message}")

        if args.check:
            if result.changed:
                would_change.append(path)
                print(f"would reformat {path}", file=sys.stderr)
            continue

        try:
            if args.in_place:
                if result.changed:
                    with open(path, "w", encoding="utf-8", newline="") as f:
                        f.write(result.formatted_text)
            else:
                sys.stdout.write(result.formatted_text)
        except OSError as exc:
            return _error(f"Failed to write output: {exc}")

    return 1 if would_change else 0


def _read_input(path: str) -> bytes:
    if path == STDIN:
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _lex_dump(buffer: bytes) -> str:
    return dump_tokens(list(scan(buffer)))


def _dump(inputs: list[tuple[str, bytes]], render: Callable[[bytes], str]) -> int:
    for path, buffer in inputs:
        try:
            output = render(buffer)
        except ParseError as error:
            position = TextPosition.from_offset(buffer, error.position)
            return _error(f"{_label(path)}Parse error at {position}: {error.message}")
        sys.stdout.write(output)
    return 0


def _label(path: str) -> str:
    return "" if path == STDIN else f"{path}: "


def _error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1
