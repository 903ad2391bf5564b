"""Public exports for account domain services."""

from .exceptions import AccountError, DuplicateAccountError
from .filters import balance_tone, filter_accounts, format_balance
from .models import AccountFilter, AccountType, EnergyAccount
from .repository import AccountRepository
from .service import AccountService

__all__ = [
    "AccountError",
    "AccountFilter",
    "AccountRepository",
    "AccountService",
    "AccountType",
    "DuplicateAccountError",
    "EnergyAccount",
    "balance_tone",
    "filter_accounts",
    "format_balance",
]
