"""Utility functions for sumup_osm."""

from sumup_osm.utils.currency import normalize_currency
from sumup_osm.utils.logging_config import get_logger, setup_logging

__all__ = ["normalize_currency", "get_logger", "setup_logging"]
