"""Tests for output rendering."""

import pytest

from sumup_osm.domain.config import ConverterConfig
from sumup_osm.domain.enrichment import RowEnricher
from sumup_osm.domain.entities import Outcome, OutputLine
from sumup_osm.domain.output import OUTPUT_HEADER, OutputFormatter, format_line, render_csv


@pytest.fixture
def formatter(config):
    """Create an OutputFormatter with the default configuration."""
    return OutputFormatter(config)


@pytest.fixture
def enrich(config):
    """Enrich a record the way the pipeline does before rendering."""
    enricher = RowEnricher(config)
    return lambda row: enricher.enrich(row, 2)


def test_render_sale(formatter, enrich, current_row):
    """A sale is one positive line built from the card details."""
    lines = formatter.render(enrich(current_row()), Outcome.SALE)

    assert lines == [
        OutputLine(
            date="2024-01-15 10:30",
            reference="VISA Credit 1234 card contactless Coffee",
            amount="10.00",
        )
    ]


def test_render_payout_fee_then_payout(formatter, enrich, paid_row):
    """A payout is a fee line then a payout line, both negative."""
    lines = formatter.render(enrich(paid_row()), Outcome.PAYOUT)

    assert [line.amount for line in lines] == ["-0.30", "-9.70"]
    fee, payout = lines
    assert fee.date == "2024-01-15 10:30"
    assert fee.reference == "transaction fee against £10.00 Coffee"
    assert payout.date == "2024-01-17"
    assert payout.reference == "payout P123 raised 2024-01-15 10:30 (£10.00 minus £0.30) Coffee"


@pytest.mark.parametrize("outcome", [Outcome.SKIP, Outcome.NO_STATUS])
def test_render_nothing(formatter, enrich, current_row, outcome):
    """Rows without an accounting effect render no lines."""
    assert formatter.render(enrich(current_row()), outcome) == []


def test_render_currency_symbol_from_config(enrich, paid_row):
    """The configured symbol appears in fee and payout references."""
    formatter = OutputFormatter(ConverterConfig(currency_symbol="€"))

    fee, payout = formatter.render(enrich(paid_row()), Outcome.PAYOUT)

    assert "€10.00" in fee.reference
    assert "(€10.00 minus €0.30)" in payout.reference


def test_render_is_idempotent(formatter, enrich, paid_row):
    """Rendering the same record twice gives the same lines."""
    row = enrich(paid_row())

    assert formatter.render(row, Outcome.PAYOUT) == formatter.render(row, Outcome.PAYOUT)


def test_render_missing_text_fields(formatter):
    """Missing text columns render as empty strings."""
    row = {"date": "2024-02-01", "total": "1.00", "last 4 digits": "(no card digits provided)"}

    (line,) = formatter.render(row, Outcome.SALE)

    assert line.reference == "  (no card digits provided)   "


def test_format_line_quotes_reference_only():
    """Only the reference column is quoted."""
    line = OutputLine(date="2024-01-15", reference='Cake "large"', amount="-1.00")

    assert format_line(line) == '2024-01-15,"Cake ""large""",-1.00'


def test_format_line_quotes_date_when_needed():
    """Dates holding a comma or quote are quoted; plain dates are not."""
    line = OutputLine(date="15 Jan, 2024", reference="Coffee", amount="1.00")
    quoted = OutputLine(date='15 "Jan"', reference="Coffee", amount="1.00")

    assert format_line(line) == '"15 Jan, 2024","Coffee",1.00'
    assert format_line(quoted) == '"15 ""Jan""","Coffee",1.00'
    assert format_line(OutputLine(date="2024-01-15", reference="Coffee", amount="1.00")) == (
        '2024-01-15,"Coffee",1.00'
    )


def test_render_csv_header_first():
    """The fixed header always leads, even with no lines."""
    assert list(render_csv([])) == [OUTPUT_HEADER]
    assert OUTPUT_HEADER == "Date,Reference,Amount"
