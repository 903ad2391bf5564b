"""In-process storage backends."""

from .account_repository import SEED_ACCOUNTS, InMemoryAccountRepository

__all__ = ["SEED_ACCOUNTS", "InMemoryAccountRepository"]
