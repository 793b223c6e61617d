"""Domain model entities for sumup_osm.

An input row stays a plain mapping keyed by column name; only what the
converter produces is modelled here.
"""

from dataclasses import dataclass, field
from enum import Enum


class Outcome(Enum):
    """Accounting meaning of one input row, resolved from its status."""

    SKIP = "skip"
    SALE = "sale"
    PAYOUT = "payout"
    UNKNOWN = "unknown"
    NO_STATUS = "no_status"


@dataclass(frozen=True)
class OutputLine:
    """One dated amount-with-reference line for the accounting tool."""

    date: str
    reference: str
    amount: str


@dataclass
class ConversionResult:
    """Lines produced by a run together with per-outcome row counts."""

    lines: list[OutputLine] = field(default_factory=list)
    rows: int = 0
    sales: int = 0
    payouts: int = 0
    skipped: int = 0
    without_status: int = 0
