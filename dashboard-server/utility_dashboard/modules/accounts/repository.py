"""Repository protocol for accounts."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import EnergyAccount


class AccountRepository(Protocol):
    """Read-only account source."""

    async def list_accounts(self) -> Sequence[EnergyAccount]:
        ...
