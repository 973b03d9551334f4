"""Logging setup for base122.

Library modules only create loggers; handlers are installed by the CLI.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "base122"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it.

    Args:
        name: Optional child name (e.g. "cli")

    Returns:
        Logger under the base122 namespace
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling this more than once does not add duplicate handlers.

    Args:
        verbose: Log at DEBUG instead of WARNING
        stream: Output stream (default: stderr)

    Returns:
        The configured package logger
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = get_logger()
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
