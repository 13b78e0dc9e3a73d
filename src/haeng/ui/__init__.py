"""UI feature - Rich console output and logging."""

from haeng.ui.console import (
    console,
    err_console,
    print_error,
    print_info,
    print_playlists,
    print_success,
    print_warning,
)
from haeng.ui.logging import setup_logging

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_playlists",
    "print_success",
    "print_warning",
    "setup_logging",
]
