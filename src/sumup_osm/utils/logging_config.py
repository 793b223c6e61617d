"""Logging configuration for the diagnostic channel."""

import logging
import sys
from typing import TextIO

from sumup_osm.domain.config import Verbosity

LOGGER_NAME = "sumup_osm"

# Diagnostics are read by people, not parsed, so keep them short
LOG_FORMAT = "%(levelname)s: %(message)s"

VERBOSITY_LEVELS = {
    Verbosity.QUIET: logging.WARNING,
    Verbosity.VERBOSE: logging.DEBUG,
}


def setup_logging(
    verbosity: Verbosity = Verbosity.QUIET,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the diagnostic channel for a conversion run.

    Args:
        verbosity: Quiet shows warnings only, verbose shows everything
        stream: Destination stream. If None, uses standard error.

    Returns:
        The package logger
    """
    level = VERBOSITY_LEVELS[verbosity]

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear any handlers from an earlier run
    logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package logger.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
