"""Utility modules for codeshim.

This module exports commonly used utility functions.
"""

from codeshim.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from codeshim.utils.shell import command_exists, exec_replace

__all__ = [
    "command_exists",
    "console",
    "err_console",
    "exec_replace",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
