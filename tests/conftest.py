"""Shared pytest fixtures for sumup_osm tests."""

import logging
from pathlib import Path

import pytest

from sumup_osm.domain.config import ConverterConfig
from sumup_osm.utils.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers a CLI run attached to the package logger."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def config():
    """Default run configuration."""
    return ConverterConfig()


@pytest.fixture
def current_row():
    """Create a current-format record as read from the export."""

    def _make(**overrides):
        row = {
            "email": "shop@example.com",
            "date": "2024-01-15 10:30",
            "transaction id": "TX1",
            "transaction type": "Sales",
            "status": "Successful",
            "card type": "VISA",
            "last 4 digits": "**** **** **** 1234",
            "process as": "Credit",
            "payment method": "Card",
            "entry mode": "Contactless",
            "auth code": "A1",
            "description": "Coffee",
            "total": "10",
            "net sale": "10.00",
            "tax amount": "0.00",
            "tip amount": "0.00",
            "fee": "",
            "payout": "",
            "payout date": "",
            "payout id": "",
            "reference": "",
        }
        row.update(overrides)
        return row

    return _make


@pytest.fixture
def paid_row(current_row):
    """Create a paid record whose amounts reconcile."""

    def _make(**overrides):
        values = {
            "status": "Paid",
            "total": "10.00",
            "fee": "0.30",
            "payout": "9.70",
            "payout date": "2024-01-17",
            "payout id": "P123",
        }
        values.update(overrides)
        return current_row(**values)

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
