"""Sample loading (files, stdin) and random sample generation."""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np

from constats.common.constants import INT64_MAX, RAND_MAX
from constats.engine.errors import InvalidInputError

_INT64_MIN = -INT64_MAX - 1


def parse_samples(text: str) -> np.ndarray:
    """Parse whitespace-separated integers into an int64 array.

    Raises InvalidInputError naming the line of the first bad token.
    """
    values: list[int] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        for token in line.split():
            try:
                value = int(token)
            except ValueError:
                raise InvalidInputError(
                    f"line {lineno}: {token!r} is not an integer"
                ) from None
            if not _INT64_MIN <= value <= INT64_MAX:
                raise InvalidInputError(f"line {lineno}: {token} is outside the int64 range")
            values.append(value)
    return np.array(values, dtype=np.int64)


def load_samples(path: str) -> np.ndarray:
    """Read samples from *path*, or from stdin when *path* is ``-``."""
    if path == "-":
        return parse_samples(sys.stdin.read())
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise InvalidInputError(f"cannot read samples from {path}: {exc}") from exc
    return parse_samples(text)


def random_samples(n: int, seed: int | None = None) -> np.ndarray:
    """Return *n* uniform integers in ``[0, RAND_MAX]``."""
    if n < 1:
        raise InvalidInputError(f"sample size must be positive, got {n}")
    rng = np.random.default_rng(seed)
    return rng.integers(0, RAND_MAX, size=n, dtype=np.int64, endpoint=True)
