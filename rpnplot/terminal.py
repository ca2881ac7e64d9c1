"""Terminal helpers: raw key input and screen clearing."""

from __future__ import annotations

import subprocess
import sys
import termios
from collections.abc import Iterator
from contextlib import contextmanager

_CLEAR_SEQUENCE = "\033[H\033[2J"


@contextmanager
def raw_mode(fd: int | None = None) -> Iterator[None]:
    """Turn off line buffering and echo on ``fd`` until the block ends."""
    if fd is None:
        fd = sys.stdin.fileno()
    original = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, original)


def clear_screen() -> None:
    """Clear the terminal screen."""
    sys.stdout.flush()
    try:
        subprocess.run(["clear"], check=False)
    except FileNotFoundError:
        sys.stdout.write(_CLEAR_SEQUENCE)
        sys.stdout.flush()