"""Coloured console messages tagged by severity."""

from __future__ import annotations

RESET = "\033[0m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
BLUE = "\033[34m"


def _emit(colour: str, tag: str, msg: str) -> None:
    print(f"{colour}{tag}{RESET}{msg}", flush=True)


def info(msg: str) -> None:
    """Print an informational message."""
    _emit(BLUE, "[INFO]", msg)


def success(msg: str) -> None:
    """Print a success message."""
    _emit(GREEN, "[SUCCESS] ", msg)


def error(msg: str) -> None:
    """Print an error message."""
    _emit(RED, "[ERROR] ", msg)


def warning(msg: str) -> None:
    """Print a warning message."""
    _emit(YELLOW, "[WARNING]", msg)