"""Row enrichment domain service."""

import re

from sumup_osm.domain import columns
from sumup_osm.domain.config import ConverterConfig
from sumup_osm.domain.errors import ValidationError, row_field_error
from sumup_osm.utils.currency import is_zero, normalize_currency
from sumup_osm.utils.logging_config import get_logger

logger = get_logger(__name__)

# Legacy exports lack these columns; a placeholder keeps references readable
LEGACY_PLACEHOLDERS = {
    columns.LAST_4_DIGITS: columns.NO_CARD_DIGITS,
    columns.PAYOUT_ID: columns.NO_PAYOUT_ID,
}


class RowEnricher:
    """Service that backfills legacy gaps and normalizes currency fields."""

    def __init__(self, config: ConverterConfig | None = None):
        """Initialize row enricher.

        Args:
            config: Run configuration
        """
        self.config = config or ConverterConfig()

    def enrich(self, row: dict[str, str | None], row_number: int) -> dict[str, str | None]:
        """Enrich one record in place.

        Args:
            row: Record keyed by lower-cased column name
            row_number: Input row number, used in diagnostics

        Returns:
            The same record

        Raises:
            ValidationError: If a currency field cannot be normalized
        """
        logger.debug("Row %d: enriching %r", row_number, row)

        last_4_digits = row.get(columns.LAST_4_DIGITS)
        if last_4_digits is not None:
            # "**** **** **** 1234" -> "1234"
            row[columns.LAST_4_DIGITS] = re.sub(r"[*\s]", "", last_4_digits)

        for field, placeholder in LEGACY_PLACEHOLDERS.items():
            if row.get(field) is None:
                logger.warning(
                    "Row %d: '%s' not defined, legacy format input suspected",
                    row_number,
                    field,
                )
                row[field] = placeholder

        for field in columns.CURRENCY_COLUMNS:
            value = row.get(field)
            if value is None:
                continue
            try:
                row[field] = normalize_currency(value)
            except ValidationError as e:
                raise type(e)(row_field_error(row_number, field, e)) from e

        for field in columns.UNSUPPORTED_AMOUNT_COLUMNS:
            value = row.get(field)
            if value is not None and not is_zero(value):
                logger.warning(
                    "Row %d: '%s' contains non-zero value %s, which is not converted",
                    row_number,
                    field,
                    value,
                )

        return row
