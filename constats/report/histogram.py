"""Z-score bucketed text histogram of a sample set."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence, TextIO

import numpy as np

from constats.common.constants import (
    BAR_CHAR,
    BAR_SCALE_SHIFT,
    BAR_WIDTH,
    BOUND_WIDTH,
    COUNT_WIDTH,
    Z_LIMIT,
    Z_STEP,
)
from constats.engine.calculate import as_samples
from constats.engine.errors import DegenerateDistributionError
from constats.engine.models import Stats
from constats.report.numfmt import format_compact


def _require_normalized(stats: Stats) -> None:
    if stats.degenerate:
        raise DegenerateDistributionError(
            f"all {stats.count} samples are outliers; "
            "no normalized distribution to bucket"
        )


def zscore(stats: Stats, value: int) -> float:
    """Z-score of *value* against the outlier-free moments (0 when stdev is 0)."""
    _require_normalized(stats)
    if stats.norm_stdev == 0:
        return 0.0
    return (value - stats.norm_mean) / stats.norm_stdev


def zrange_value(stats: Stats, z: float) -> int:
    """Raw value at z-score *z*, truncated toward zero."""
    _require_normalized(stats)
    return int(stats.norm_mean + z * stats.norm_stdev)


def bucket_bounds(stats: Stats) -> list[tuple[float, float]]:
    """Half-wide z-score buckets from ``max(-3, z(min))`` up to ``min(3, z(max))``.

    A distribution without spread gets the single bucket ``(-0.5, 0.5)``.
    """
    z_low = max(-Z_LIMIT, zscore(stats, stats.min))
    z_high = min(Z_LIMIT, zscore(stats, stats.max))
    if z_low >= z_high:
        return [(-Z_STEP, Z_STEP)]

    n = len(np.arange(z_low, z_high, Z_STEP))
    edges = [z_low + Z_STEP * k for k in range(n + 1)]
    return list(zip(edges[:-1], edges[1:]))


def _bar(count: int, unit: int) -> str:
    # Not clamped: a bucket holding more than BAR_WIDTH units widens its line.
    return (BAR_CHAR * (count // unit)).ljust(BAR_WIDTH)


def render(samples: Sequence[int] | np.ndarray, stats: Stats) -> list[str]:
    """Return one ``low -> high : bar : count`` line per z-score bucket.

    A bucket counts the samples within its raw bounds, both ends inclusive,
    so a sample sitting on a bound shared by two buckets is counted in both.
    Samples beyond three deviations are not counted.

    Raises DegenerateDistributionError when ``stats`` has no inliers.
    """
    _require_normalized(stats)
    ordered = np.sort(as_samples(samples))
    unit = max(1, len(ordered) >> BAR_SCALE_SHIFT)

    lines = []
    for z_min, z_max in bucket_bounds(stats):
        low = zrange_value(stats, z_min)
        high = zrange_value(stats, z_max)
        first = np.searchsorted(ordered, low, side="left")
        past = np.searchsorted(ordered, high, side="right")
        count = max(0, int(past - first))

        lines.append(
            f"{format_compact(low, BOUND_WIDTH)} -> {format_compact(high, BOUND_WIDTH)}"
            f" : {_bar(count, unit)} : {format_compact(count, COUNT_WIDTH)}"
        )
    return lines


def write_lines(lines: Iterable[str], out: TextIO | None = None) -> None:
    """Write *lines* to *out* (stdout by default), one per line."""
    out = sys.stdout if out is None else out
    for line in lines:
        out.write(line + "\n")
