"""Logging setup for haeng."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from haeng.ui.console import err_console

LOGGER_NAME = "haeng"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Diagnostics go to stderr so they never mix with listing output.
    Calling this more than once replaces the previous handler.

    Args:
        verbose: Log at DEBUG level instead of WARNING.

    Returns:
        The configured package logger.
    """
    log = logging.getLogger(LOGGER_NAME)
    for handler in list(log.handlers):
        if isinstance(handler, RichHandler):
            log.removeHandler(handler)

    handler = RichHandler(
        console=err_console,
        rich_tracebacks=True,
        show_path=False,
        show_time=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    log.addHandler(handler)
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    log.propagate = False
    return log
