"""Rule table for payment form fields.

Each form field maps to an ordered list of rules. Rules are evaluated in order and
the first one that fails produces that field's error, mirroring what the payment
overlay shows beneath each input. The same table backs both the server endpoint and
the client-side checks.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Callable, Mapping

from .cards import is_valid_card_number
from .models import PAYMENT_FIELDS, FieldError

Check = Callable[[str, datetime], bool]

AMOUNT_PATTERN = re.compile(r"[0-9]+(\.[0-9]{1,2})?")
EXPIRY_PATTERN = re.compile(r"[0-9]{2}/[0-9]{2}")
CVV_PATTERN = re.compile(r"[0-9]{3,4}")


@dataclass(frozen=True, slots=True)
class Rule:
    check: Check
    message: str

    def passes(self, value: str, now: datetime) -> bool:
        return self.check(value, now)


def _required(value: str, _: datetime) -> bool:
    return len(value) >= 1


def _matches(pattern: re.Pattern[str]) -> Check:
    def check(value: str, _: datetime) -> bool:
        return pattern.fullmatch(value) is not None

    return check


def _positive_amount(value: str, _: datetime) -> bool:
    return Decimal(value) > 0


def _valid_card(value: str, _: datetime) -> bool:
    return is_valid_card_number(value)


def expiry_in_future(value: str, now: datetime) -> bool:
    """True when ``MM/YY`` names a real month whose first day is still ahead of ``now``."""
    month_text, year_text = value.split("/")
    month, year = int(month_text), int(year_text)
    if not 1 <= month <= 12:
        return False
    return datetime(2000 + year, month, 1) > now


PAYMENT_RULES: dict[str, tuple[Rule, ...]] = {
    "amount": (
        Rule(_required, "Amount is required"),
        Rule(_matches(AMOUNT_PATTERN), "Amount must be a number with up to 2 decimal places"),
        Rule(_positive_amount, "Amount must be greater than 0"),
    ),
    "cardNumber": (
        Rule(_required, "Card number is required"),
        Rule(_valid_card, "Please enter a valid card number"),
    ),
    "expiryDate": (
        Rule(_required, "Expiry date is required"),
        Rule(_matches(EXPIRY_PATTERN), "Use MM/YY format"),
        Rule(expiry_in_future, "Invalid expiry date"),
    ),
    "cvv": (
        Rule(_required, "CVV is required"),
        Rule(_matches(CVV_PATTERN), "CVV must be 3 or 4 digits"),
    ),
}


def validate_field(field: str, value: str, *, now: datetime | None = None) -> FieldError | None:
    now = now or datetime.now()
    for rule in PAYMENT_RULES[field]:
        if not rule.passes(value, now):
            return FieldError(path=(field,), message=rule.message)
    return None


def validate_payment_fields(values: Mapping[str, str], *, now: datetime | None = None) -> list[FieldError]:
    """Validate every form field, returning at most one error per field in form order."""
    now = now or datetime.now()
    errors: list[FieldError] = []
    for field in PAYMENT_FIELDS:
        error = validate_field(field, values.get(field, ""), now=now)
        if error is not None:
            errors.append(error)
    return errors


__all__ = [
    "PAYMENT_RULES",
    "Rule",
    "expiry_in_future",
    "validate_field",
    "validate_payment_fields",
]
