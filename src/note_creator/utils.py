"""Utility functions for note-creator."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    console: bool = True,
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Level for all sinks
        log_file: Optional file to log to, rotated at 10 MB
        console: Whether to log to stderr
    """
    logger.remove()

    if log_file:
        logger.add(
            str(log_file),
            level=log_level,
            rotation="10 MB",
            retention="10 days",
            backtrace=True,
            diagnose=True,
            enqueue=True,
            colorize=False,
        )

    if console:
        logger.add(sys.stderr, level=log_level, backtrace=True, diagnose=True, colorize=True)
