"""Pure helpers shared by the dashboard views."""

from __future__ import annotations

from typing import Iterable, Literal

from .models import AccountFilter, EnergyAccount

BalanceTone = Literal["negative", "neutral", "positive"]


def filter_accounts(accounts: Iterable[EnergyAccount], tag: AccountFilter | str) -> list[EnergyAccount]:
    """Return the accounts matching ``tag`` in their original order."""
    tag = AccountFilter(tag)
    if tag is AccountFilter.ALL:
        return list(accounts)
    return [account for account in accounts if account.type.value == tag.value]


def balance_tone(balance: float) -> BalanceTone:
    if balance < 0:
        return "negative"
    if balance == 0:
        return "neutral"
    return "positive"


def format_balance(balance: float) -> str:
    # Sign follows the dollar symbol, e.g. "$-40.00".
    return f"${balance:.2f}"


__all__ = [
    "BalanceTone",
    "balance_tone",
    "filter_accounts",
    "format_balance",
]
