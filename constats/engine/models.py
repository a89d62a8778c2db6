"""Value types produced by the statistics engine."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Tolerance:
    """Outlier radius around the mean: finite, or unbounded when radius is None."""

    radius: int | None

    @classmethod
    def unbounded(cls) -> Tolerance:
        return cls(radius=None)

    @property
    def is_unbounded(self) -> bool:
        return self.radius is None

    def bounds(self, center: float) -> tuple[float, float]:
        """Return the inclusive ``(lower, upper)`` inlier window around *center*."""
        if self.radius is None:
            return -math.inf, math.inf
        return center - self.radius, center + self.radius

    def __str__(self) -> str:
        return "unbounded" if self.radius is None else f"±{self.radius}"


@dataclass(frozen=True)
class Stats:
    """Summary of one sample set, with and without its outliers.

    The ``norm_*`` fields are computed over inliers only and are all ``None``
    when every sample was classified an outlier (see :attr:`degenerate`).
    """

    count: int
    mean: float
    stdev: float
    abdev: float
    min: int
    max: int
    tolerance: Tolerance
    outliers: int
    norm_mean: float | None
    norm_stdev: float | None
    norm_abdev: float | None
    norm_min: int | None
    norm_max: int | None

    @property
    def inliers(self) -> int:
        return self.count - self.outliers

    @property
    def degenerate(self) -> bool:
        return self.inliers == 0
