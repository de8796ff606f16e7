"""Rich console formatting utilities.

Provides the shared consoles, message printers and size formatting
used for CLI output.
"""

import sys

from rich.console import Console
from rich.markup import escape

from nls.core.theme import get_theme

SIZE_UNITS: tuple[str, ...] = ("B", "K", "M", "G", "T", "P")


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def human_readable_size(size_bytes: int) -> str:
    """Format a byte count with a B/K/M/G/T/P unit and two decimals.

    A raw count of exactly 1024 bytes stays in bytes; a scaled value of
    exactly 1024 moves on to the next unit. Scaling stops at P.

    Args:
        size_bytes: Non-negative byte count.

    Returns:
        Formatted size, e.g. "1024.00B", "1.00K", "1.00M".
    """
    size = float(size_bytes)
    unit = 0
    if size > 1024:
        size /= 1024
        unit = 1
        while size >= 1024 and unit < len(SIZE_UNITS) - 1:
            size /= 1024
            unit += 1
    return f"{size:.2f}{SIZE_UNITS[unit]}"


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}", soft_wrap=True)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]", soft_wrap=True)
