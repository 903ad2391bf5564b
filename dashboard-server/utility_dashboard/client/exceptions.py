"""Client-side error types."""

from __future__ import annotations

from typing import Any, Sequence


class DashboardClientError(Exception):
    """Base class for errors raised by the dashboard client."""


class PaymentRequestError(DashboardClientError):
    """Raised when the payment endpoint answers with a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        errors: Sequence[dict[str, Any]] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = list(errors)


class AccountListError(DashboardClientError):
    """Raised when the account endpoint answers with something other than a list of accounts."""
