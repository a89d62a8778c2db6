"""Tests for constats.report.numfmt.format_compact."""

import pytest

from constats.report.numfmt import format_compact


# ---------------------------------------------------------------------------
# values that fit
# ---------------------------------------------------------------------------


def test_zero_is_padded():
    assert format_compact(0, 5) == "0    "


def test_fitting_value_is_left_aligned():
    assert format_compact(1999, 6) == "1999  "


def test_exact_fit_has_no_padding():
    assert format_compact(1999, 4) == "1999"


def test_negative_sign_takes_a_column():
    assert format_compact(-42, 5) == "-42  "


# ---------------------------------------------------------------------------
# truncation with suffix
# ---------------------------------------------------------------------------


def test_thousands_truncate_not_round():
    assert format_compact(1999, 3) == "1K "
    assert format_compact(1500, 3) == "1K "
    assert format_compact(1999, 2) == "1K"


def test_truncation_never_rounds_up():
    assert format_compact(999_999, 5) == "999K "


def test_dropped_multiple_of_three_backs_out_a_full_group():
    # 7 digits in 4 columns: "1234" leaves 3 dropped, which cannot
    # take a suffix without backing out three more digits.
    assert format_compact(1_234_567, 4) == "1M  "


def test_millions():
    assert format_compact(123_456_789, 6) == "123M  "


def test_negative_truncated():
    assert format_compact(-1500, 4) == "-1K "


def test_int64_max_in_bound_field():
    assert format_compact(2**63 - 1, 13) == "9223372036G  "


@pytest.mark.parametrize(
    "value, width, expected",
    [
        (10**3, 1, None),
        (10**6, 2, "1M"),
        (10**9, 2, "1G"),
        (10**12, 2, "1T"),
        (10**15, 2, "1P"),
        (10**18, 2, "1E"),
    ],
)
def test_suffix_ladder(value, width, expected):
    if expected is None:
        with pytest.raises(ValueError):
            format_compact(value, width)
    else:
        assert format_compact(value, width) == expected


@pytest.mark.parametrize("value", [0, 7, -7, 12345, -12345, 10**17, -(2**63)])
@pytest.mark.parametrize("width", [4, 12, 13])
def test_output_has_requested_width(value, width):
    assert len(format_compact(value, width)) == width


# ---------------------------------------------------------------------------
# errors
# ---------------------------------------------------------------------------


def test_zero_width_raises():
    with pytest.raises(ValueError):
        format_compact(5, 0)


def test_negative_in_one_column_raises():
    with pytest.raises(ValueError):
        format_compact(-5, 1)


def test_too_narrow_for_suffix_raises():
    with pytest.raises(ValueError):
        format_compact(1999, 1)
