"""Output rendering for the accounting tool import format."""

from typing import Iterable, Iterator, Mapping, Optional

from sumup_osm.domain import columns
from sumup_osm.domain.config import ConverterConfig
from sumup_osm.domain.entities import Outcome, OutputLine

OUTPUT_HEADER = "Date,Reference,Amount"


def _text(row: Mapping[str, Optional[str]], field: str) -> str:
    return row.get(field) or ""


def negate(amount: str) -> str:
    """Return a normalized amount as money out."""
    return f"-{amount}"


def quote(text: str) -> str:
    """Wrap text in double quotes, doubling any embedded quotes."""
    return '"' + text.replace('"', '""') + '"'


def quote_if_needed(text: str) -> str:
    """Quote text only when it would otherwise split or break the row."""
    if any(char in text for char in ",\"\r\n"):
        return quote(text)
    return text


def format_line(line: OutputLine) -> str:
    """Render one line as CSV; the reference is always quoted."""
    return f"{quote_if_needed(line.date)},{quote(line.reference)},{line.amount}"


def render_csv(lines: Iterable[OutputLine]) -> Iterator[str]:
    """Yield the header and then every line as CSV text.

    Args:
        lines: Lines in output order
    """
    yield OUTPUT_HEADER
    for line in lines:
        yield format_line(line)


class OutputFormatter:
    """Service that turns a classified record into output lines."""

    def __init__(self, config: ConverterConfig | None = None):
        """Initialize output formatter.

        Args:
            config: Run configuration; supplies the currency symbol
        """
        self.config = config or ConverterConfig()

    def render(self, row: Mapping[str, Optional[str]], outcome: Outcome) -> list[OutputLine]:
        """Render the lines for one record.

        Args:
            row: Enriched record
            outcome: Outcome from the classifier

        Returns:
            One line for a sale, fee then payout for a payout, none otherwise
        """
        if outcome is Outcome.SALE:
            return [self.sale_line(row)]
        if outcome is Outcome.PAYOUT:
            return [self.fee_line(row), self.payout_line(row)]
        return []

    def sale_line(self, row: Mapping[str, Optional[str]]) -> OutputLine:
        """Card sale income line."""
        reference = " ".join(
            [
                _text(row, columns.CARD_TYPE),
                _text(row, columns.PROCESS_AS),
                _text(row, columns.LAST_4_DIGITS),
                _text(row, columns.PAYMENT_METHOD).lower(),
                _text(row, columns.ENTRY_MODE).lower(),
                _text(row, columns.DESCRIPTION),
            ]
        )
        return OutputLine(
            date=_text(row, columns.DATE),
            reference=reference,
            amount=_text(row, columns.TOTAL),
        )

    def fee_line(self, row: Mapping[str, Optional[str]]) -> OutputLine:
        """Processing fee line, dated with the sale."""
        symbol = self.config.currency_symbol
        reference = (
            f"transaction fee against {symbol}{_text(row, columns.TOTAL)} "
            f"{_text(row, columns.DESCRIPTION)}"
        )
        return OutputLine(
            date=_text(row, columns.DATE),
            reference=reference,
            amount=negate(_text(row, columns.FEE)),
        )

    def payout_line(self, row: Mapping[str, Optional[str]]) -> OutputLine:
        """Net payout line, dated with the payout."""
        symbol = self.config.currency_symbol
        reference = (
            f"payout {_text(row, columns.PAYOUT_ID)} raised {_text(row, columns.DATE)} "
            f"({symbol}{_text(row, columns.TOTAL)} minus {symbol}{_text(row, columns.FEE)}) "
            f"{_text(row, columns.DESCRIPTION)}"
        )
        return OutputLine(
            date=_text(row, columns.PAYOUT_DATE),
            reference=reference,
            amount=negate(_text(row, columns.PAYOUT)),
        )
