"""Console logging of debug and error messages."""

from __future__ import annotations


def debug(message: str) -> None:
    """Print a debug line to standard output."""
    print(f"[DEBUG]\t{message}", flush=True)


def error(message: str) -> None:
    """Print an error line to standard output."""
    print(f"\t[ERROR]\t{message}", flush=True)