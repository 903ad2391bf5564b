"""Account domain specific exceptions."""


class AccountError(Exception):
    """Base class for account domain errors."""


class DuplicateAccountError(AccountError):
    """Raised when an account store is seeded with a repeated id."""
