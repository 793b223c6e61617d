"""CSV conversion domain service."""

import csv
from pathlib import Path
from typing import Iterable, Iterator, Optional

from sumup_osm.domain.classification import TransactionClassifier
from sumup_osm.domain.columns import is_known_column, normalize_header
from sumup_osm.domain.config import ConverterConfig
from sumup_osm.domain.enrichment import RowEnricher
from sumup_osm.domain.entities import ConversionResult, Outcome
from sumup_osm.domain.errors import (
    HeaderError,
    ValidationError,
    empty_header,
    malformed_csv,
    no_header,
    undecodable_file,
    unknown_column,
)
from sumup_osm.domain.output import OutputFormatter
from sumup_osm.utils.logging_config import get_logger

logger = get_logger(__name__)

# The header is row 1, so the first record is row 2
FIRST_DATA_ROW = 2


def validate_headers(headers: list[str], source: str) -> list[str]:
    """Check a header row against the known column set.

    Args:
        headers: Header cells as read
        source: File name for messages

    Returns:
        Record keys (cleaned, lower-cased), in column order

    Raises:
        HeaderError: On an empty or unknown header
    """
    keys = []
    for header in headers:
        cleaned = normalize_header(header)
        if not cleaned:
            raise HeaderError(empty_header())
        if not is_known_column(cleaned):
            raise HeaderError(unknown_column(cleaned, source))
        keys.append(cleaned.lower())
    return keys


def read_rows(csv_file_path: str) -> Iterator[Optional[dict[str, str]]]:
    """Yield one record per data row of an export.

    The header is validated before the first record is yielded. Fields
    missing from a short row are absent from its record. A blank line
    yields None so that row numbers keep matching the file.

    Args:
        csv_file_path: Path to the export

    Raises:
        HeaderError: If the header row is missing or invalid
        ValidationError: If the file is not valid CSV or not UTF-8
        FileNotFoundError: If the file does not exist
    """
    csv_path = Path(csv_file_path)
    source = str(csv_path)

    with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.reader(f, delimiter=",")
        try:
            headers = next(reader, None)
            if headers is None:
                raise HeaderError(no_header(source))
            keys = validate_headers(headers, source)
            logger.debug("Read headers: %s", ", ".join(keys))

            for values in reader:
                yield dict(zip(keys, values)) if values else None
        except csv.Error as e:
            raise ValidationError(malformed_csv(source, reader.line_num, e)) from e
        except UnicodeDecodeError as e:
            raise ValidationError(undecodable_file(source, e)) from e


class ConversionService:
    """Service that converts an export into accounting tool lines."""

    def __init__(self, config: ConverterConfig | None = None):
        """Initialize conversion service.

        Args:
            config: Run configuration, shared with every component
        """
        self.config = config or ConverterConfig()
        self.enricher = RowEnricher(self.config)
        self.classifier = TransactionClassifier(self.config)
        self.formatter = OutputFormatter(self.config)

    def convert_file(self, csv_file_path: str) -> ConversionResult:
        """Convert an export file.

        Args:
            csv_file_path: Path to the export

        Returns:
            Conversion result with all lines and row counts

        Raises:
            DomainError: On any fatal header, value or integrity problem
            FileNotFoundError: If the file does not exist
        """
        return self.convert_rows(read_rows(csv_file_path))

    def convert_rows(
        self, rows: Iterable[Optional[dict[str, str | None]]]
    ) -> ConversionResult:
        """Run records through enrichment, classification and rendering.

        Records are processed in order and each is discarded once its lines
        are rendered. The first fatal error stops the run.

        Args:
            rows: Records keyed by lower-cased column name; None marks a blank
                line, which only advances the row number

        Returns:
            Conversion result with all lines and row counts
        """
        result = ConversionResult()

        for row_number, row in enumerate(rows, start=FIRST_DATA_ROW):
            if row is None:
                continue
            row = self.enricher.enrich(row, row_number)
            outcome = self.classifier.classify(row, row_number)
            lines = self.formatter.render(row, outcome)
            for line in lines:
                logger.debug("Row %d: %s,%s,%s", row_number, line.date, line.reference, line.amount)
            result.lines.extend(lines)

            result.rows += 1
            if outcome is Outcome.SALE:
                result.sales += 1
            elif outcome is Outcome.PAYOUT:
                result.payouts += 1
            elif outcome is Outcome.SKIP:
                result.skipped += 1
            elif outcome is Outcome.NO_STATUS:
                result.without_status += 1

        logger.info(
            "Processing completed: %d rows (%d sales, %d payouts, %d skipped, %d without status)",
            result.rows,
            result.sales,
            result.payouts,
            result.skipped,
            result.without_status,
        )
        return result
