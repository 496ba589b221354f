#!/usr/bin/env python3
"""Quick perf benchmark for JavaScript lexing."""

from __future__ import annotations

import argparse
import cProfile
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from jslexpy.lexer import Lexer
from jslexpy.pipeline import lex_javascript


def _load_sources(root: Path, limit: int) -> list[str]:
    files = sorted(path for pattern in ("*.js", "*.mjs") for path in root.rglob(pattern) if path.is_file())
    if limit > 0:
        files = files[:limit]
    # Scripts in the wild are not always valid UTF-8; keep every byte.
    return [path.read_text(encoding="utf-8", errors="surrogateescape") for path in files]


def _lex_all(lexer: Lexer, sources: list[str], label: str, show_progress: bool) -> tuple[float, int, int]:
    tokens = 0
    failed = 0
    start = time.perf_counter()
    for source in tqdm(sources, desc=label, unit="file", disable=not show_progress):
        result = lex_javascript(source, lexer=lexer)
        tokens += len(result.tokens)
        failed += int(result.has_errors)
    return time.perf_counter() - start, tokens, failed


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark JavaScript lexing throughput")
    parser.add_argument("js_root", type=Path, help="Directory scanned recursively for .js/.mjs files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument("--no-progress", action="store_true", help="Disable tqdm progress bars")
    parser.add_argument("--profile", action="store_true", help="Run cProfile over the measured runs")
    parser.add_argument("--profile-top", type=int, default=30, help="Number of cProfile rows to print")
    parser.add_argument("--limit-files", type=int, default=0, help="Only lex the first N files (0 = all)")
    args = parser.parse_args()

    if not args.js_root.is_dir():
        raise SystemExit(f"Invalid js_root: {args.js_root}")
    sources = _load_sources(args.js_root, args.limit_files)
    if not sources:
        raise SystemExit(f"No .js/.mjs files found under {args.js_root}")

    show_progress = not args.no_progress
    lexer = Lexer()
    for index in range(max(args.warmups, 0)):
        _lex_all(lexer, sources, f"warmup {index + 1}", show_progress)

    profiler = cProfile.Profile() if args.profile else None
    if profiler is not None:
        profiler.enable()
    runs = [_lex_all(lexer, sources, f"run {index + 1}", show_progress) for index in range(max(args.runs, 1))]
    if profiler is not None:
        profiler.disable()
        print("\n[cProfile top functions]")
        pstats.Stats(profiler).sort_stats("tottime").print_stats(max(args.profile_top, 1))

    timings = [duration for duration, _, _ in runs]
    _, tokens, failed = runs[-1]
    mean = statistics.mean(timings)
    print(f"Files: {len(sources)}  Tokens: {tokens}  Files with lex errors: {failed}")
    print(f"Runs: {len(timings)}  best={min(timings):.4f}s  median={statistics.median(timings):.4f}s  mean={mean:.4f}s")
    print(f"Files/s (mean): {len(sources) / mean:.1f}  Tokens/s (mean): {tokens / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
