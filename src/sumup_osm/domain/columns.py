"""Known export columns and the record keys derived from them."""

import re

DATE = "date"
STATUS = "status"
CARD_TYPE = "card type"
LAST_4_DIGITS = "last 4 digits"
PROCESS_AS = "process as"
PAYMENT_METHOD = "payment method"
ENTRY_MODE = "entry mode"
DESCRIPTION = "description"
TOTAL = "total"
TAX_AMOUNT = "tax amount"
TIP_AMOUNT = "tip amount"
FEE = "fee"
PAYOUT = "payout"
PAYOUT_DATE = "payout date"
PAYOUT_ID = "payout id"

KNOWN_COLUMNS = frozenset(
    {
        "auth code",
        CARD_TYPE,
        DATE,
        DESCRIPTION,
        "email",
        ENTRY_MODE,
        FEE,
        LAST_4_DIGITS,
        "net sale",
        PAYMENT_METHOD,
        PAYOUT,
        PAYOUT_DATE,
        PAYOUT_ID,
        PROCESS_AS,
        "reference",
        STATUS,
        TAX_AMOUNT,
        TIP_AMOUNT,
        TOTAL,
        "transaction id",
        "transaction type",
    }
)

CURRENCY_COLUMNS = (TOTAL, FEE, PAYOUT, TAX_AMOUNT, TIP_AMOUNT)

# Amounts the converter acknowledges but never folds into its arithmetic
UNSUPPORTED_AMOUNT_COLUMNS = (TAX_AMOUNT, TIP_AMOUNT)

NO_CARD_DIGITS = "(no card digits provided)"
NO_PAYOUT_ID = "(no payout id provided)"


def normalize_header(header: str) -> str:
    """Trim a header cell and collapse internal whitespace.

    Args:
        header: Header cell as read

    Returns:
        Cleaned header, case preserved
    """
    return re.sub(r"\s+", " ", header.strip())


def is_known_column(header: str) -> bool:
    """Return True if a cleaned header names a known column."""
    return header.lower() in KNOWN_COLUMNS
