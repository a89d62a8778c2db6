"""Fixed-width integer formatting with K/M/G/T/P/E magnitude suffixes."""

from __future__ import annotations

# (minimum dropped digits, suffix), largest first
_SUFFIXES: list[tuple[int, str]] = [
    (18, "E"),
    (15, "P"),
    (12, "T"),
    (9, "G"),
    (6, "M"),
    (3, "K"),
]


def _suffix(dropped: int) -> str:
    for threshold, suffix in _SUFFIXES:
        if dropped >= threshold:
            return suffix
    return " "


def format_compact(value: int, width: int) -> str:
    """Render *value* left-aligned in exactly *width* characters.

    When the decimal digits do not fit, trailing digits are cut in groups of
    three and replaced by a magnitude suffix. The shown digits are always a
    truncated prefix of the true value (``1999`` at width 3 is ``"1K "``).
    A negative sign takes one column.

    Raises ValueError when *width* cannot hold the sign, one digit and the
    suffix that the value needs.
    """
    if width < 1:
        raise ValueError(f"field width too narrow for {value}")
    if value < 0:
        return "-" + format_compact(-value, width - 1)

    digits = str(value)
    shown = min(width, len(digits))
    dropped = len(digits) - shown

    if dropped:
        # Back out enough shown digits to make room for the suffix while
        # keeping the dropped digit count a multiple of three.
        backed_out = 3 - dropped % 3
        shown -= backed_out
        dropped += backed_out
        if shown < 1:
            raise ValueError(f"field width {width} too narrow for {value}")
        return (digits[:shown] + _suffix(dropped)).ljust(width)

    return digits.ljust(width)
