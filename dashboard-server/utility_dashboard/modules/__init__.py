"""Feature modules and their public exports."""

from . import accounts, payments

__all__ = [
    "accounts",
    "payments",
]
