"""Dashboard view state: account list, type filter and the open payment overlay."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

import httpx

from utility_dashboard.modules.accounts.filters import BalanceTone, balance_tone, filter_accounts, format_balance
from utility_dashboard.modules.accounts.models import AccountFilter, AccountType, EnergyAccount

from .api import DashboardApiClient
from .exceptions import DashboardClientError
from .notifications import ToastCenter
from .overlay import PaymentOverlay

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AccountCard:
    id: str
    type: AccountType
    address: str
    balance_display: str
    balance_tone: BalanceTone

    @classmethod
    def from_account(cls, account: EnergyAccount) -> "AccountCard":
        return cls(
            id=account.id,
            type=account.type,
            address=account.address,
            balance_display=format_balance(account.balance),
            balance_tone=balance_tone(account.balance),
        )


class Dashboard:
    def __init__(
        self,
        api: DashboardApiClient,
        *,
        toasts: ToastCenter | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._api = api
        self._clock = clock
        self.toasts = toasts if toasts is not None else ToastCenter()
        self.accounts: list[EnergyAccount] = []
        self.loading = True
        self.selected_type = AccountFilter.ALL
        self.overlay: PaymentOverlay | None = None
        self._load_started = False

    async def load(self) -> None:
        """Fetch the account list once. Failures are logged and leave the list empty."""
        if self._load_started:
            return
        self._load_started = True
        try:
            self.accounts = await self._api.get_accounts()
        except (httpx.HTTPError, DashboardClientError, ValueError, KeyError) as exc:
            logger.error("Error fetching accounts: %s", exc)
        finally:
            self.loading = False

    def select_type(self, tag: AccountFilter | str) -> None:
        self.selected_type = AccountFilter(tag)

    def is_selected(self, tag: AccountFilter | str) -> bool:
        return self.selected_type is AccountFilter(tag)

    @property
    def visible_accounts(self) -> list[EnergyAccount]:
        return filter_accounts(self.accounts, self.selected_type)

    @property
    def cards(self) -> list[AccountCard]:
        return [AccountCard.from_account(account) for account in self.visible_accounts]

    @property
    def selected_account(self) -> EnergyAccount | None:
        return self.overlay.account if self.overlay is not None else None

    def open_payment(self, account: EnergyAccount) -> PaymentOverlay:
        if self.overlay is not None and self.overlay.is_processing:
            return self.overlay
        self.overlay = PaymentOverlay(
            account,
            self._api.process_payment,
            toasts=self.toasts,
            on_close=self._handle_overlay_closed,
            clock=self._clock,
        )
        return self.overlay

    def close_payment(self) -> None:
        if self.overlay is not None:
            self.overlay.close()

    def _handle_overlay_closed(self) -> None:
        self.overlay = None
