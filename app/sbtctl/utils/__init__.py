"""Utility modules for sbtctl.

This module exports commonly used utility functions.
"""

from sbtctl.utils.formatting import (
    configure_logging,
    console,
    create_summary_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from sbtctl.utils.shell import command_exists, run_interactive

__all__ = [
    "command_exists",
    "configure_logging",
    "console",
    "create_summary_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_interactive",
]
