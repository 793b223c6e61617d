"""Run configuration threaded through the converter components."""

from dataclasses import dataclass
from enum import Enum

DEFAULT_CURRENCY_SYMBOL = "£"


class Verbosity(str, Enum):
    """How much the diagnostic channel reports."""

    QUIET = "quiet"
    VERBOSE = "verbose"


@dataclass(frozen=True)
class ConverterConfig:
    """Settings for one conversion run."""

    verbosity: Verbosity = Verbosity.QUIET
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
