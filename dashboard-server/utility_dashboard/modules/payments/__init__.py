"""Public exports for payment validation."""

from .exceptions import PaymentError, PaymentValidationError
from .formatters import (
    FIELD_FORMATTERS,
    format_amount,
    format_card_number,
    format_cvv,
    format_expiry_date,
)
from .models import PAYMENT_FIELDS, FieldError, PaymentInput, PaymentResult, mask_card_number
from .service import PaymentService
from .validation import validate_field, validate_payment_fields

__all__ = [
    "FIELD_FORMATTERS",
    "FieldError",
    "PAYMENT_FIELDS",
    "PaymentError",
    "PaymentInput",
    "PaymentResult",
    "PaymentService",
    "PaymentValidationError",
    "format_amount",
    "format_card_number",
    "format_cvv",
    "format_expiry_date",
    "mask_card_number",
    "validate_field",
    "validate_payment_fields",
]
