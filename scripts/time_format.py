#!/usr/bin/env python3
"""Quick perf benchmark for formatting YANG modules."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from yangfmt import FormatConfig, run_format


def _collect_yang_files(root: Path) -> list[Path]:
    files = sorted(root.rglob("*.yang"))
    return [path for path in files if path.is_file()]


def _run_once(
    sources: list[bytes],
    config: FormatConfig,
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_changed = 0
    total_errors = 0
    iterator = (
        tqdm(sources, desc=label, unit="file")
        if show_progress
        else sources
    )
    for source in iterator:
        result = run_format(source, config)
        total_changed += result.changed
        total_errors += result.has_errors
    duration = time.perf_counter() - start
    return duration, total_changed, total_errors


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark YANG formatting throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for .yang files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--canonical-order",
        action="store_true",
        help="Enable canonical statement ordering while formatting",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    parser.add_argument(
        "--limit-files",
        type=int,
        default=0,
        help="Optional file limit for quick profiling/smoke tests (0 = all files)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Invalid root directory: {root}")

    files = _collect_yang_files(root)
    if not files:
        raise SystemExit(f"No .yang files found under {root}")
    if args.limit_files > 0:
        files = files[: args.limit_files]

    # Read once up front so the runs measure formatting, not disk I/O
    sources = [path.read_bytes() for path in files]
    total_bytes = sum(len(source) for source in sources)
    config = FormatConfig(canonical_order=args.canonical_order)
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                sources,
                config,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        changed_count = 0
        error_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, changed_count, error_count = _run_once(
                sources,
                config,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, changed_count, error_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, changed_count, error_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, changed_count, error_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Dataset: {root}")
    print(f"Files: {len(files)} ({total_bytes} bytes)")
    print(f"Would change: {changed_count}")
    print(f"Parse errors: {error_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {len(files) / mean:.1f}")
    print(f"KiB/s (mean):   {total_bytes / 1024 / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
