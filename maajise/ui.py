"""Coloured console messages and boxed banners."""

from __future__ import annotations

import sys

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[0;34m"
RESET = "\033[0m"

_BOX_WIDTH = 57
_TOP = "╔" + "═" * (_BOX_WIDTH + 2) + "╗"
_BOTTOM = "╚" + "═" * (_BOX_WIDTH + 2) + "╝"


def error(msg: str) -> None:
    """Print an error message to standard error."""
    print(f"{RED}✗{RESET} {msg}", file=sys.stderr)


def success(msg: str) -> None:
    """Print a success message."""
    print(f"{GREEN}✓{RESET} {msg}")


def info(msg: str) -> None:
    """Print an informational message."""
    print(f"{BLUE}→{RESET} {msg}")


def warn(msg: str) -> None:
    """Print a warning message."""
    print(f"{YELLOW}⚠{RESET} {msg}")


def _box(color: str, lines: tuple[str, ...]) -> None:
    print()
    print(f"{color}{_TOP}{RESET}")
    for line in lines:
        print(f"{color}║  {line:<{_BOX_WIDTH}}║{RESET}")
    print(f"{color}{_BOTTOM}{RESET}")
    print()


def header(title: str) -> None:
    """Print a blue box holding a title."""
    _box(BLUE, (title,))


def summary(*args: str) -> None:
    """Print a green box holding the given lines."""
    _box(GREEN, args)