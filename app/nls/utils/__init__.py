"""Utility modules for nls.

This module exports commonly used utility functions.
"""

from nls.utils.formatting import (
    console,
    err_console,
    human_readable_size,
    print_error,
    print_info,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "human_readable_size",
    "print_error",
    "print_info",
    "print_warning",
]
