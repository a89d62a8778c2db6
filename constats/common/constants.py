"""Shared constants for the statistics engine and text report."""

from pathlib import Path

# Project root = directory holding print_stats.py and the optional .env
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# ── Outlier tolerance sketch ─────────────────────────────────────────────────
INT64_MAX = 2**63 - 1
SKETCH_MIN_SIZE = 16            # at or below this, the sketch covers every sample
SKETCH_SHIFT = 4                # otherwise it covers the first N >> 4 samples
TOLERANCE_FACTOR = 5            # tolerance = factor * sketch abdev
TOLERANCE_LIMIT = INT64_MAX / 32  # sketch abdev above this → unbounded tolerance

# ── Z-score histogram layout (fixed) ─────────────────────────────────────────
Z_LIMIT = 3.0                   # buckets span at most [-3, 3]
Z_STEP = 0.5
BAR_WIDTH = 32
BAR_CHAR = "X"
BAR_SCALE_SHIFT = 5             # one bar char per N >> 5 samples (min 1)
BOUND_WIDTH = 13                # field width of a bucket's raw bounds
COUNT_WIDTH = 12                # field width of a bucket's count

# ── Sample generation (C rand() range) ───────────────────────────────────────
RAND_MAX = 2**31 - 1
DEFAULT_SAMPLE_SIZE = 10_000_000
