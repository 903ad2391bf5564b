"""Domain models for utility accounts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class AccountType(str, Enum):
    ELECTRICITY = "ELECTRICITY"
    GAS = "GAS"


class AccountFilter(str, Enum):
    """Filter tags offered by the dashboard; ``ALL`` keeps every account."""

    ALL = "ALL"
    ELECTRICITY = "ELECTRICITY"
    GAS = "GAS"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class EnergyAccount:
    id: str
    type: AccountType
    address: str
    balance: float

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "EnergyAccount":
        return cls(
            id=str(payload["id"]),
            type=AccountType(payload["type"]),
            address=str(payload["address"]),
            balance=payload["balance"],
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "address": self.address,
            "balance": self.balance,
        }
