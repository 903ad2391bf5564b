"""Domain services for account listing."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from .models import EnergyAccount
from .repository import AccountRepository

logger = logging.getLogger(__name__)


class AccountService:
    """Encapsulates the read-only account use cases."""

    def __init__(self, repository: AccountRepository, *, latency: float = 0.0) -> None:
        self._repository = repository
        self._latency = latency

    async def list_accounts(self) -> Sequence[EnergyAccount]:
        if self._latency > 0:
            await asyncio.sleep(self._latency)
        accounts = await self._repository.list_accounts()
        logger.debug("Listing %d accounts", len(accounts))
        return accounts
