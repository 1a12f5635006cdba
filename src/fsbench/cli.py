#!/usr/bin/env python3
"""
fsbench CLI -- entry point for the filesystem latency harness.

Run with no arguments to benchmark the default (thread pool) backend with
100 serial iterations and 10 concurrent chains per size bucket.

Usage:
  fsbench [--backend NAME] [--compare] [--iterations N] [--concurrency N]
          [--workspace DIR] [--sizes 1KB,64KB] [--config FILE]
          [--console auto|rich|plain] [--verbose | --quiet]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from fsbench.comparison import compare_reports, report_comparisons
from fsbench.config import BACKEND_NAMES, BenchSettings, SettingsError, load_settings
from fsbench.console import CONSOLE_BACKENDS, configure, console
from fsbench.runner import run_benchmarks

logger = logging.getLogger("fsbench")

EXIT_SETTINGS = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fsbench",
        description="fsbench -- write/read/stat latency under serial and concurrent load",
    )
    parser.add_argument(
        "--backend",
        choices=BACKEND_NAMES,
        default=None,
        help="Filesystem backend to measure (default: thread)",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Run every backend and print a side-by-side comparison",
    )
    parser.add_argument("--iterations", type=int, default=None, help="Serial repetitions")
    parser.add_argument("--concurrency", type=int, default=None, help="Chains per batch")
    parser.add_argument("--workspace", default=None, help="Scratch directory")
    parser.add_argument(
        "--sizes",
        default=None,
        help="Comma-separated size buckets to run (e.g. 1KB,64KB)",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML settings file")
    parser.add_argument(
        "--console",
        choices=CONSOLE_BACKENDS,
        default="auto",
        help="Console output style (default: auto)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", help="Enable debug logging")
    verbosity.add_argument("--quiet", action="store_true", help="Only log errors")
    return parser


def resolve_settings(args: argparse.Namespace) -> BenchSettings:
    """Defaults, then the YAML file, then command-line flags."""
    settings = load_settings(args.config)
    sizes = args.sizes.split(",") if args.sizes else None
    return settings.with_overrides(
        iterations=args.iterations,
        concurrency=args.concurrency,
        workspace=args.workspace,
        backend=args.backend,
        sizes=sizes,
    )


def backends_for(settings: BenchSettings, *, compare: bool) -> list[str]:
    """The selected backend first, then (in compare mode) every other one."""
    if not compare:
        return [settings.backend]
    return [settings.backend, *(name for name in BACKEND_NAMES if name != settings.backend)]


def _configure_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        level=level,
    )


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    # -- Console configuration ----------------------------------------------
    configure(backend=args.console)

    # -- Logging configuration (stderr, keeps the workspace footprint clean)
    _configure_logging(args)

    try:
        settings = resolve_settings(args)
    except SettingsError as exc:
        console.error(str(exc))
        sys.exit(EXIT_SETTINGS)

    backends = backends_for(settings, compare=args.compare)

    console.banner("File I/O Performance Benchmark")
    console.blank()

    try:
        reports = asyncio.run(run_benchmarks(settings, backends))
    except KeyboardInterrupt:
        console.warning("Interrupted.")
        sys.exit(EXIT_INTERRUPTED)

    if len(reports) > 1:
        baseline, *candidates = reports
        for candidate in candidates:
            rows = compare_reports(baseline, candidate)
            report_comparisons(baseline.backend, candidate.backend, rows)

    console.banner("Benchmark Complete")


if __name__ == "__main__":
    main()
