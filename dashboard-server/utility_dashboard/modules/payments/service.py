"""Payment validation service.

Payments are validated and acknowledged only. Nothing is charged, stored or applied
to the account balance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from .exceptions import PaymentValidationError
from .models import PaymentInput, PaymentResult
from .validation import validate_payment_fields

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Payment processed successfully"


@dataclass(slots=True)
class PaymentService:
    clock: Callable[[], datetime] = field(default=datetime.now)

    def validate(self, payment: PaymentInput) -> None:
        errors = validate_payment_fields(payment.form_values(), now=self.clock())
        if errors:
            raise PaymentValidationError(errors)

    async def process(self, payment: PaymentInput) -> PaymentResult:
        logger.info("Processing payment for account %s", payment.account_id)
        self.validate(payment)
        logger.info("Payment data validated: %s", payment.masked())
        return PaymentResult(success=True, message=SUCCESS_MESSAGE)
