"""Logging setup for the test-run reporter."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "testrun_reporter"


def setup_logging(level: str = "INFO", console: Optional[Console] = None) -> logging.Logger:
    """
    Route package logs through a single Rich handler.

    Calling this again replaces the previous handler rather than stacking a
    new one.

    Args:
        level: Logging level name
        console: Console to log to, stderr by default

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
