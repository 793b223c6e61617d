"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Every subclass is fatal to a conversion run. Subclasses provide semantic
    categories while preserving ValueError compatibility.
    """


class ValidationError(DomainError):
    """Invalid input structure or value."""


class HeaderError(ValidationError):
    """Header row is empty, missing, or names an unknown column."""


class InvalidCurrencyError(ValidationError):
    """Currency field contains characters other than digits and one dot."""


class NormalizationError(ValidationError):
    """Currency value still malformed after padding."""


class IntegrityError(DomainError):
    """Upstream data is corrupted or unexpected."""


class ReconciliationError(IntegrityError):
    """Fee plus payout does not equal the total of a paid transaction."""


class UnknownStatusError(IntegrityError):
    """Row status is not one the classifier recognises."""


def invalid_currency(raw: object) -> str:
    """Return message for a non-numeric currency value."""
    return f"Non-numeric value '{raw}' is not a currency amount"


def normalization_failed(raw: str, value: str) -> str:
    """Return message for a value that padding could not repair."""
    return f"Currency value '{raw}' normalized to '{value}', which is not a two-decimal amount"


def row_field_error(row_number: int, field: str, error: Exception) -> str:
    """Return message locating a value error in the input."""
    return f"Row {row_number}: field '{field}': {error}"


def empty_header() -> str:
    """Return message for a blank header cell."""
    return "Header contains an empty field"


def unknown_column(column: str, source: str) -> str:
    """Return message for a header outside the known set."""
    return f"Unknown column '{column}' in {source}"


def undecodable_file(source: str, error: UnicodeDecodeError) -> str:
    """Return message for an export that is not UTF-8 text."""
    return (
        f"Cannot read {source} as UTF-8 at byte {error.start}: {error.reason}. "
        "Re-export the report as UTF-8 CSV"
    )


def no_header(source: str) -> str:
    """Return message for a file without a header row."""
    return f"No header row found in {source}"


def malformed_csv(source: str, line_number: int, error: Exception) -> str:
    """Return message for a CSV syntax error."""
    return f"Malformed CSV in {source} at line {line_number}: {error}"


def reconciliation_mismatch(row_number: int, total: str, fee: str, payout: str) -> str:
    """Return message when fee and payout do not add up to the total."""
    return (
        f"Row {row_number}: payout {payout} plus fee {fee} "
        f"does not equal total {total}"
    )


def missing_amount(row_number: int, field: str) -> str:
    """Return message when a paid row lacks one of its amounts."""
    return f"Row {row_number}: paid transaction has no '{field}' value to reconcile"


def missing_sale_total(row_number: int) -> str:
    """Return message when a successful row has no total."""
    return f"Row {row_number}: successful transaction has no 'total' value"


def unknown_status(row_number: int, status: str) -> str:
    """Return message for an unrecognised status."""
    return f"Row {row_number}: unknown status '{status}'"
