"""Colorful CLI output helpers for board listings and command results."""

import os
import sys

from ..models import Column

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗
WARN = "!"

# Heading color per board column
COLUMN_COLORS: dict[Column, str] = {
    Column.TODO: YELLOW,
    Column.IN_PROGRESS: BLUE,
    Column.DONE: GREEN,
}


def _supports_color() -> bool:
    """Check if stdout is a color terminal and NO_COLOR is unset."""
    if os.environ.get("NO_COLOR"):
        return False
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _colorize(text: str, color: str) -> str:
    """Apply color to text if terminal supports it."""
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def success(message: str) -> None:
    """Print success message with green checkmark."""
    check = _colorize(CHECK, GREEN)
    print(f"{check} {message}")


def info(message: str) -> None:
    """Print info message with yellow bullet."""
    bullet = _colorize(BULLET, YELLOW)
    print(f"{bullet} {message}")


def warning(message: str) -> None:
    """Print a non-fatal problem, e.g. a board that could not be saved."""
    mark = _colorize(WARN, YELLOW)
    print(f"{mark} Warning: {message}")


def error(message: str) -> None:
    """Print error message with red cross."""
    cross = _colorize(CROSS, RED)
    print(f"{cross} {message}")


def column_heading(column: Column, title: str, count: int) -> None:
    """Print a column heading like ``TO DO (3)`` in the column's color."""
    color = COLUMN_COLORS.get(column, BOLD)
    print(_colorize(f"{title.upper()} ({count})", color))


def card(position: int, title: str, ref: str, description: str | None = None) -> None:
    """Print one card line, with its description dimmed underneath."""
    print(f"  {position}. {title}  {_colorize(f'[{ref}]', DIM)}")
    if description:
        print(_colorize(f"     {description}", DIM))


def empty_column() -> None:
    """Print the placeholder for a column without cards."""
    print(_colorize("  (empty)", DIM))
