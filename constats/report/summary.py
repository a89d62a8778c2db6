"""Full text report: moments, outlier block, histogram and closing summary."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from constats.common.console import RULE, field
from constats.engine.models import Stats
from constats.report.histogram import render


def _moments(stats: Stats) -> list[str]:
    return [
        field("Sample Size", stats.count),
        field("Average value", f"{stats.mean:f}"),
        field("Minimum value", stats.min),
        field("Maximum value", stats.max),
        field("Standard Deviation", f"{stats.stdev:f}"),
        field("Mean Absolute Deviation", f"{stats.abdev:f}"),
    ]


def _without_outliers(stats: Stats) -> list[str]:
    if stats.degenerate:
        return ["Without Outliers: no samples left"]
    return [
        "Without Outliers:",
        field("Average value", f"{stats.norm_mean:f}", indent="\t"),
        field("Minimum value", stats.norm_min, indent="\t"),
        field("Maximum value", stats.norm_max, indent="\t"),
        field("Standard Deviation", f"{stats.norm_stdev:f}", indent="\t"),
        field("Mean Absolute Deviation", f"{stats.norm_abdev:f}", indent="\t"),
    ]


def _closing(stats: Stats) -> list[str]:
    if stats.degenerate:
        norm = "norm mean:\tn/a;\tnorm abs dev:\tn/a"
    else:
        norm = f"norm mean:\t{stats.norm_mean:f};\tnorm abs dev:\t{stats.norm_abdev:f}"
    return [
        "Summary:",
        norm,
        f"min:\t\t{stats.min};\t\tmax:\t\t{stats.max}",
    ]


def format_report(
    samples: Sequence[int] | np.ndarray,
    stats: Stats,
    *,
    histogram_only: bool = False,
) -> list[str]:
    """Return the report lines for *samples* summarised by *stats*.

    With *histogram_only* just the histogram lines are returned. A degenerate
    ``stats`` (every sample an outlier) gets a notice in place of the
    histogram instead of an error.
    """
    if stats.degenerate:
        histogram = ["Histogram: unavailable, every sample is an outlier"]
    else:
        histogram = render(samples, stats)
    if histogram_only:
        return histogram

    lines = [RULE]
    lines += _moments(stats)
    lines.append("")
    lines.append(field("Outlier Count", stats.outliers, width=16))
    lines.append(field("Tolerance", stats.tolerance, width=16))
    if stats.outliers > 0:
        lines += _without_outliers(stats)
    lines.append("")
    lines += histogram
    lines.append("")
    lines += _closing(stats)
    lines.append(RULE)
    return lines
