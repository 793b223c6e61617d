"""Transaction classification domain service."""

import re
from decimal import Decimal
from typing import Mapping, Optional

from sumup_osm.domain import columns
from sumup_osm.domain.config import ConverterConfig
from sumup_osm.domain.entities import Outcome
from sumup_osm.domain.errors import (
    ReconciliationError,
    UnknownStatusError,
    ValidationError,
    missing_amount,
    missing_sale_total,
    reconciliation_mismatch,
    unknown_status,
)
from sumup_osm.utils.logging_config import get_logger

logger = get_logger(__name__)

# Searched in order, first match wins
STATUS_OUTCOMES = (
    (re.compile(r"failed|cancelled", re.IGNORECASE), Outcome.SKIP),
    (re.compile(r"successful", re.IGNORECASE), Outcome.SALE),
    (re.compile(r"paid", re.IGNORECASE), Outcome.PAYOUT),
)


def resolve_outcome(status: Optional[str]) -> Outcome:
    """Map a status value to its outcome.

    Args:
        status: Status field, or None when the row has none

    Returns:
        Outcome variant; UNKNOWN for anything unrecognised, including ""
    """
    if status is None:
        return Outcome.NO_STATUS
    for pattern, outcome in STATUS_OUTCOMES:
        if pattern.search(status):
            return outcome
    return Outcome.UNKNOWN


def check_reconciliation(row: Mapping[str, Optional[str]], row_number: int) -> None:
    """Verify that fee plus payout equals total for a paid row.

    Args:
        row: Enriched record
        row_number: Input row number

    Raises:
        ReconciliationError: If an amount is missing or the sum differs
    """
    for field in (columns.TOTAL, columns.FEE, columns.PAYOUT):
        if row.get(field) is None:
            raise ReconciliationError(missing_amount(row_number, field))

    total = row[columns.TOTAL]
    fee = row[columns.FEE]
    payout = row[columns.PAYOUT]

    if Decimal(fee) + Decimal(payout) != Decimal(total):
        raise ReconciliationError(reconciliation_mismatch(row_number, total, fee, payout))


class TransactionClassifier:
    """Service that decides how many accounting events a row represents."""

    def __init__(self, config: ConverterConfig | None = None):
        """Initialize transaction classifier.

        Args:
            config: Run configuration
        """
        self.config = config or ConverterConfig()

    def classify(self, row: Mapping[str, Optional[str]], row_number: int) -> Outcome:
        """Classify an enriched record.

        SKIP and NO_STATUS rows are reported on the diagnostic channel.
        PAYOUT rows are reconciled before being returned, so a PAYOUT
        outcome always carries consistent amounts.

        Args:
            row: Enriched record (not modified)
            row_number: Input row number

        Returns:
            SKIP, SALE, PAYOUT or NO_STATUS

        Raises:
            UnknownStatusError: If the status is not recognised
            ReconciliationError: If a paid row does not reconcile
            ValidationError: If a successful row has no total
        """
        status = row.get(columns.STATUS)
        outcome = resolve_outcome(status)

        if outcome is Outcome.UNKNOWN:
            raise UnknownStatusError(unknown_status(row_number, status))

        if outcome is Outcome.PAYOUT:
            check_reconciliation(row, row_number)
        elif outcome is Outcome.SALE:
            if row.get(columns.TOTAL) is None:
                raise ValidationError(missing_sale_total(row_number))
        elif outcome is Outcome.SKIP:
            logger.info("Row %d: Skipping zero-value %s transaction", row_number, status)
        elif outcome is Outcome.NO_STATUS:
            logger.info("Row %d: 'status' not defined", row_number)

        return outcome
