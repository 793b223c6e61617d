"""Currency value normalization."""

import re

from sumup_osm.domain.errors import (
    InvalidCurrencyError,
    NormalizationError,
    invalid_currency,
    normalization_failed,
)

CURRENCY_CHARS_PATTERN = re.compile(r"^[0-9.]*$")
NORMALIZED_PATTERN = re.compile(r"^\d+\.\d{2}$")


def normalize_currency(raw: str) -> str:
    """Canonicalize a raw currency string to two decimal places.

    Handles the shapes found in processor exports:
    - "5" -> "5.00"
    - "12.3" -> "12.30"
    - ".5" -> "0.50"
    - "  7  " -> "7.00"
    - "" -> "0.00"

    Args:
        raw: Currency string as read from the export

    Returns:
        String matching ``\\d+\\.\\d{2}``

    Raises:
        InvalidCurrencyError: If the value holds anything but digits and a
            single decimal point
        NormalizationError: If padding does not yield a two-decimal value
    """
    if raw is None:
        raise InvalidCurrencyError(invalid_currency(raw))

    value = re.sub(r"\s", "", raw)

    if not CURRENCY_CHARS_PATTERN.match(value) or value.count(".") > 1:
        raise InvalidCurrencyError(invalid_currency(raw))

    if re.search(r"\.\d$", value):
        value += "0"
    if not re.search(r"\.\d{2}$", value):
        value += ".00"
    if value.startswith("."):
        value = "0" + value

    if not NORMALIZED_PATTERN.match(value):
        raise NormalizationError(normalization_failed(raw, value))

    return value


def is_zero(value: str) -> bool:
    """Return True if a normalized value is made only of zeros and dots."""
    return re.match(r"^[0.]*$", value) is not None
