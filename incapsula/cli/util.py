"""
Utility functions for CLI graceful handling.

Provides helpers for handling keyboard interrupts and signals gracefully.
"""

from __future__ import annotations

from collections.abc import Callable
import signal
import sys
from typing import Any

CANCELLED_EXIT = 130  # POSIX: 128 + SIGINT (2)


def _print_cancelled(msg: str = "✖ Cancelled by user") -> None:
    sys.stderr.write("\n" + msg + "\n")
    sys.stderr.flush()


def graceful_main(fn: Callable[[list[str]], int], argv: list[str]) -> int:
    """
    Run fn(argv) and handle Ctrl-C/SIGTERM nicely.

    Returns:
        Exit code (130 for cancelled, or fn's return value)
    """

    def _term(_signum: int, _frame: Any) -> None:
        raise KeyboardInterrupt()

    old_term = signal.getsignal(signal.SIGTERM)
    signal.signal(signal.SIGTERM, _term)

    try:
        return int(fn(argv) or 0)
    except KeyboardInterrupt:
        _print_cancelled()
        return CANCELLED_EXIT
    finally:
        signal.signal(signal.SIGTERM, old_term)
