"""ANSI colour codes, status helpers and report rule lines."""

from __future__ import annotations

import sys


class C:
    """ANSI colour codes (no-op if not a tty)."""

    _tty = sys.stderr.isatty()
    RED = "\033[0;31m" if _tty else ""
    GREEN = "\033[0;32m" if _tty else ""
    CYAN = "\033[0;36m" if _tty else ""
    YELLOW = "\033[1;33m" if _tty else ""
    NC = "\033[0m" if _tty else ""


# Status lines go to stderr; stdout carries only report text.


def info(msg: str) -> None:
    print(f"{C.CYAN}[INFO]{C.NC}  {msg}", file=sys.stderr)


def ok(msg: str) -> None:
    print(f"{C.GREEN}[ OK ]{C.NC} {msg}", file=sys.stderr)


def warn(msg: str) -> None:
    print(f"{C.YELLOW}[WARN]{C.NC} {msg}", file=sys.stderr)


def fail(msg: str) -> None:
    print(f"{C.RED}[FAIL]{C.NC} {msg}", file=sys.stderr)
    sys.exit(1)


# ── Report formatting ────────────────────────────────────────────────────────

RULE = "-" * 79


def field(label: str, value: object, *, width: int = 23, indent: str = "") -> str:
    """Render one ``label : value`` report row with an aligned colon."""
    return f"{indent}{label:<{width}}: {value}"
