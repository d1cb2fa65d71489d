"""Utility modules for gitprune.

This module exports commonly used utility functions.
"""

from gitprune.utils.formatting import (
    console,
    err_console,
    format_percentage,
    print_error,
    print_info,
    print_success,
)
from gitprune.utils.shell import BatchResult, CommandResult, command_exists, run_batch, run_command

__all__ = [
    "BatchResult",
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "format_percentage",
    "print_error",
    "print_info",
    "print_success",
    "run_batch",
    "run_command",
]
