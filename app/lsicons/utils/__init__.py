"""Utility modules for lsicons.

This module exports commonly used utility functions.
"""

from lsicons.utils.formatting import (
    console,
    err_console,
    print_error,
    print_listing_line,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_listing_line",
]
