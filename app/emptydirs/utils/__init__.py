"""Utility modules for emptydirs.

This module exports commonly used utility functions.
"""

from emptydirs.utils.formatting import (
    console,
    err_console,
    format_duration,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "format_duration",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
