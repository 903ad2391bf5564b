"""Payment domain specific exceptions."""

from __future__ import annotations

from typing import Sequence

from .models import FieldError


class PaymentError(Exception):
    """Base class for payment domain errors."""


class PaymentValidationError(PaymentError):
    """Raised when a submitted payment violates the request schema."""

    def __init__(self, errors: Sequence[FieldError]) -> None:
        super().__init__("Invalid payment data")
        self.errors = list(errors)
