"""Domain models for payment submissions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from utility_dashboard.modules.accounts.models import AccountType

# Form fields in the order they appear on the payment overlay.
PAYMENT_FIELDS: tuple[str, ...] = ("amount", "cardNumber", "expiryDate", "cvv")


@dataclass(frozen=True, slots=True)
class FieldError:
    path: tuple[str | int, ...]
    message: str

    @property
    def field(self) -> str | None:
        return str(self.path[0]) if self.path else None

    def to_payload(self) -> dict[str, Any]:
        return {"path": list(self.path), "message": self.message}


@dataclass(frozen=True, slots=True)
class PaymentInput:
    amount: str
    card_number: str = field(repr=False)
    expiry_date: str
    cvv: str = field(repr=False)
    account_id: str
    account_type: AccountType

    def form_values(self) -> dict[str, str]:
        return {
            "amount": self.amount,
            "cardNumber": self.card_number,
            "expiryDate": self.expiry_date,
            "cvv": self.cvv,
        }

    def masked(self) -> dict[str, str]:
        """Loggable view of the payment; never exposes the card number or CVV."""
        return {
            "amount": self.amount,
            "cardNumber": mask_card_number(self.card_number),
            "expiryDate": self.expiry_date,
            "cvv": "***",
            "accountId": self.account_id,
            "accountType": self.account_type.value,
        }


@dataclass(frozen=True, slots=True)
class PaymentResult:
    success: bool
    message: str


def mask_card_number(card_number: str) -> str:
    return "****" + card_number[-4:]
