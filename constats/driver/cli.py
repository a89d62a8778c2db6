"""CLI entrypoint: load or generate samples, compute statistics, print the report."""

from __future__ import annotations

import argparse

import structlog

from constats.common.console import fail, info, ok, warn
from constats.common.logging import configure_structlog
from constats.common.settings import Settings, load_dotenv, load_settings
from constats.driver.samples import load_samples, random_samples
from constats.engine.calculate import calculate
from constats.engine.errors import ConstatsError
from constats.report.histogram import write_lines
from constats.report.summary import format_report


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="constats",
        description="Outlier-tolerant statistics and z-score histogram of int64 samples.",
        epilog=(
            "File: %(prog)s SAMPLES.txt  |  "
            "Stdin: %(prog)s -  |  "
            "Random: %(prog)s --random [N]"
        ),
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Whitespace-separated integer samples ('-' reads stdin)",
    )
    parser.add_argument(
        "-r",
        "--random",
        metavar="N",
        type=int,
        nargs="?",
        const=settings.sample_size,
        default=None,
        help=f"Generate N random samples in [0, 2^31-1] (default N: {settings.sample_size})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.seed,
        help="Seed for --random",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="structlog level for diagnostics on stderr (default: %(default)s)",
    )
    parser.add_argument(
        "--histogram-only",
        action="store_true",
        default=False,
        help="Print only the z-score histogram",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    try:
        settings = load_settings()
    except ValueError as exc:
        fail(str(exc))

    parser = _build_parser(settings)
    args = parser.parse_args(argv)
    if args.random is None and args.file is None:
        parser.error("Provide a samples FILE, '-' for stdin, or --random [N].")
    if args.random is not None and args.file is not None:
        parser.error("FILE and --random are mutually exclusive.")

    try:
        configure_structlog(args.log_level)
    except ValueError as exc:
        fail(str(exc))
    log = structlog.get_logger("cli")

    try:
        if args.random is not None:
            info(f"Generating {args.random:,} random samples ...")
            samples = random_samples(args.random, seed=args.seed)
        else:
            samples = load_samples(args.file)
            ok(f"Loaded {len(samples):,} samples from {args.file}")
        stats = calculate(samples)
    except ConstatsError as exc:
        fail(str(exc))

    log.info("report_ready", count=stats.count, outliers=stats.outliers)
    if stats.degenerate:
        warn("Every sample was classified an outlier; histogram skipped.")
    write_lines(format_report(samples, stats, histogram_only=args.histogram_only))
