"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass, field

from utility_dashboard.core.config import Settings
from utility_dashboard.infrastructure.memory.account_repository import InMemoryAccountRepository
from utility_dashboard.modules.accounts import AccountService
from utility_dashboard.modules.payments import PaymentService


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    account_service: AccountService = field(init=False)
    payment_service: PaymentService = field(init=False)

    def __post_init__(self) -> None:
        self.init_services()

    def init_services(self) -> None:
        """Build the service singletons over the seeded account store."""
        self.account_service = AccountService(
            InMemoryAccountRepository(),
            latency=self.settings.accounts_latency,
        )
        self.payment_service = PaymentService()


__all__ = ["ApplicationContainer"]
