"""Live-typing formatters for the payment form fields.

Every formatter is total: any string goes in, a display string comes out. They only
shape what the user typed and never decide validity, which is left to the rule table
in :mod:`.validation`.
"""

from __future__ import annotations

import re
from typing import Callable

FormatFunction = Callable[[str], str]

_NON_DIGITS = re.compile(r"[^0-9]")
_NON_AMOUNT = re.compile(r"[^0-9.]")


def _digits(value: str) -> str:
    return _NON_DIGITS.sub("", value)


def format_card_number(value: str) -> str:
    digits = _digits(value)[:16]
    return " ".join(digits[i:i + 4] for i in range(0, len(digits), 4))


def format_expiry_date(value: str) -> str:
    cleaned = _digits(value)[:4]
    if len(cleaned) >= 2:
        return f"{cleaned[:2]}/{cleaned[2:]}"
    return cleaned


def format_cvv(value: str) -> str:
    return _digits(value)[:4]


def format_amount(value: str) -> str:
    """Keep digits and the first decimal point, with at most two decimals."""
    sanitized = _NON_AMOUNT.sub("", value)
    whole, dot, rest = sanitized.partition(".")
    if not dot:
        return whole
    return f"{whole}.{rest.replace('.', '')[:2]}"


FIELD_FORMATTERS: dict[str, FormatFunction] = {
    "amount": format_amount,
    "cardNumber": format_card_number,
    "expiryDate": format_expiry_date,
    "cvv": format_cvv,
}


__all__ = [
    "FIELD_FORMATTERS",
    "FormatFunction",
    "format_amount",
    "format_card_number",
    "format_cvv",
    "format_expiry_date",
]
