"""Tests for diagnostic channel setup."""

import io
import logging

from sumup_osm.domain.config import Verbosity
from sumup_osm.utils.logging_config import get_logger, setup_logging


def test_quiet_shows_warnings_only():
    """Quiet runs drop info and debug messages."""
    stream = io.StringIO()
    setup_logging(Verbosity.QUIET, stream=stream)
    logger = get_logger("test")

    logger.info("hidden")
    logger.warning("shown")

    assert stream.getvalue() == "WARNING: shown\n"


def test_verbose_shows_everything():
    """Verbose runs include debug messages."""
    stream = io.StringIO()
    setup_logging(Verbosity.VERBOSE, stream=stream)

    get_logger("test").debug("trace")

    assert "DEBUG: trace" in stream.getvalue()


def test_setup_replaces_handlers():
    """Reconfiguring does not stack handlers."""
    setup_logging(Verbosity.QUIET, stream=io.StringIO())
    logger = setup_logging(Verbosity.QUIET, stream=io.StringIO())

    assert len(logger.handlers) == 1


def test_get_logger_names():
    """Module loggers hang below the package logger."""
    assert get_logger("sumup_osm.domain.enrichment").name == "sumup_osm.domain.enrichment"
    assert get_logger("test").name == "sumup_osm.test"
    assert isinstance(get_logger("test"), logging.Logger)
