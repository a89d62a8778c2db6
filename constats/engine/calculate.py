"""Outlier-tolerant descriptive statistics over int64 sample sets.

The outlier tolerance is derived from a cheap sketch of the data (the mean
absolute deviation of its first sixteenth) rather than from a full scan, so
classification costs O(N/16) on top of the two full passes that produce the
moments with and without outliers.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
import structlog

from constats.common.constants import (
    INT64_MAX,
    SKETCH_MIN_SIZE,
    SKETCH_SHIFT,
    TOLERANCE_FACTOR,
    TOLERANCE_LIMIT,
)
from constats.engine.errors import InvalidInputError
from constats.engine.models import Stats, Tolerance

_log = structlog.get_logger("stats_engine")


def as_samples(samples: Sequence[int] | np.ndarray) -> np.ndarray:
    """Return *samples* as a read-only one-dimensional int64 array.

    Raises InvalidInputError for empty, multi-dimensional or non-integer input,
    and for values outside the int64 range.
    """
    try:
        arr = np.asarray(samples)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidInputError(f"samples are not an integer array: {exc}") from exc

    if arr.ndim != 1:
        raise InvalidInputError(f"samples must be one-dimensional, got {arr.ndim} dimensions")
    if arr.size == 0:
        raise InvalidInputError("sample set is empty")
    if arr.dtype.kind not in "iu":
        raise InvalidInputError(f"samples must be integers, got dtype {arr.dtype}")
    if arr.dtype.kind == "u" and int(arr.max()) > INT64_MAX:
        raise InvalidInputError("samples exceed the int64 range")

    view = arr.astype(np.int64, copy=False).view()
    view.flags.writeable = False
    return view


def sketch_tolerance(samples: Sequence[int] | np.ndarray) -> Tolerance:
    """Suggest the max deviation from the mean before a sample is an outlier.

    Only the first ``N >> 4`` samples (all of them when N <= 16) are read:
    ``5 * abdev`` of that head around its own mean, unbounded when the
    sketch abdev is too large for the product to fit in int64.
    """
    arr = as_samples(samples)
    size = len(arr)
    if size > SKETCH_MIN_SIZE:
        size >>= SKETCH_SHIFT

    head = arr[:size].astype(np.float64)
    sketch_abdev = float(np.abs(head - head.mean()).mean())

    if sketch_abdev > TOLERANCE_LIMIT:
        return Tolerance.unbounded()
    return Tolerance(int(TOLERANCE_FACTOR * sketch_abdev))


def _inlier_mask(arr: np.ndarray, mean: float, tolerance: Tolerance) -> np.ndarray:
    lower, upper = tolerance.bounds(mean)
    return (arr >= lower) & (arr <= upper)


def count_outliers(
    samples: Sequence[int] | np.ndarray, mean: float, tolerance: Tolerance
) -> int:
    """Count samples outside ``[mean - tolerance, mean + tolerance]``."""
    arr = as_samples(samples)
    return len(arr) - int(np.count_nonzero(_inlier_mask(arr, mean, tolerance)))


def calculate(samples: Sequence[int] | np.ndarray) -> Stats:
    """Compute full-set and outlier-free statistics of *samples*.

    Standard deviations are population deviations (divide by N). When every
    sample is an outlier the ``norm_*`` fields of the result are ``None``.
    """
    arr = as_samples(samples)
    count = len(arr)
    mean = float(arr.mean())
    tolerance = sketch_tolerance(arr)

    # Pass 1: full-set moments and extrema, outlier classification.
    dev = np.abs(arr - mean)
    abdev = float(dev.mean())
    stdev = math.sqrt(float(np.square(dev).mean()))
    inliers = arr[_inlier_mask(arr, mean, tolerance)]
    outliers = count - len(inliers)

    if len(inliers) == 0:
        _log.warning("all_samples_outliers", count=count, tolerance=str(tolerance))
        norm_mean = norm_stdev = norm_abdev = None
        norm_min = norm_max = None
    else:
        norm_mean = float(inliers.mean())
        # Pass 2: needs the completed inlier mean.
        norm_dev = np.abs(inliers - norm_mean)
        norm_abdev = float(norm_dev.mean())
        norm_stdev = math.sqrt(float(np.square(norm_dev).mean()))
        norm_min = int(inliers.min())
        norm_max = int(inliers.max())

    _log.debug(
        "stats_calculated",
        count=count,
        outliers=outliers,
        tolerance=str(tolerance),
    )
    return Stats(
        count=count,
        mean=mean,
        stdev=stdev,
        abdev=abdev,
        min=int(arr.min()),
        max=int(arr.max()),
        tolerance=tolerance,
        outliers=outliers,
        norm_mean=norm_mean,
        norm_stdev=norm_stdev,
        norm_abdev=norm_abdev,
        norm_min=norm_min,
        norm_max=norm_max,
    )
