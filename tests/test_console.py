"""Tests for constats.common.console."""

import pytest

from constats.common.console import RULE, fail, field, info, ok, warn


def test_field_aligns_colon():
    assert field("Sample Size", 5) == "Sample Size            : 5"
    assert field("Outlier Count", 0, width=16) == "Outlier Count   : 0"
    assert field("Minimum value", -3, indent="\t") == "\tMinimum value          : -3"


def test_rule_width():
    assert RULE == "-" * 79


def test_status_lines_go_to_stderr(capsys):
    info("hello")
    ok("done")
    warn("careful")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[INFO]" in captured.err and "hello" in captured.err
    assert "[ OK ]" in captured.err
    assert "[WARN]" in captured.err


def test_fail_exits_1(capsys):
    with pytest.raises(SystemExit) as exc_info:
        fail("broken")
    assert exc_info.value.code == 1
    assert "[FAIL]" in capsys.readouterr().err
