"""Payment overlay state machine.

States::

    idle -> focus_tracking -> submitting -> closed           (payment accepted)
                                        -> error            (payment rejected)

``error`` behaves like ``idle`` with an inline banner: the user can edit and submit
again. ``close()`` cancels from any state except ``submitting`` and throws away
everything typed so far.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Awaitable, Callable, Mapping

import httpx

from utility_dashboard.modules.accounts.models import EnergyAccount
from utility_dashboard.modules.payments.formatters import FIELD_FORMATTERS
from utility_dashboard.modules.payments.models import PAYMENT_FIELDS
from utility_dashboard.modules.payments.validation import validate_field, validate_payment_fields

from .api import DEFAULT_PAYMENT_ERROR
from .exceptions import PaymentRequestError
from .notifications import ToastCenter

logger = logging.getLogger(__name__)

PaymentSubmitter = Callable[[Mapping[str, str]], Awaitable[str]]

PROCESSING_TOAST_ID = "payment-processing"
CARD_NUMBER_PLACEHOLDER = "•••• •••• •••• ••••"
EXPIRY_PLACEHOLDER = "MM/YY"
CVV_PLACEHOLDER = "•••"


class OverlayState(str, Enum):
    IDLE = "idle"
    FOCUS_TRACKING = "focus_tracking"
    SUBMITTING = "submitting"
    CLOSED = "closed"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class CardPreview:
    card_number: str
    expiry_date: str
    cvv: str


class PaymentOverlay:
    def __init__(
        self,
        account: EnergyAccount,
        submit_payment: PaymentSubmitter,
        *,
        toasts: ToastCenter | None = None,
        on_close: Callable[[], None] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.account = account
        self.toasts = toasts if toasts is not None else ToastCenter()
        self._submit_payment = submit_payment
        self._on_close = on_close
        self._clock = clock
        self.state = OverlayState.IDLE
        self._reset()

    def _reset(self) -> None:
        self.values: dict[str, str] = {name: "" for name in PAYMENT_FIELDS}
        self.errors: dict[str, str] = {}
        self.focused: str | None = None
        self.payment_error: str | None = None

    @property
    def is_open(self) -> bool:
        return self.state is not OverlayState.CLOSED

    @property
    def is_processing(self) -> bool:
        return self.state is OverlayState.SUBMITTING

    def _ensure_editable(self) -> bool:
        return self.state not in (OverlayState.SUBMITTING, OverlayState.CLOSED)

    def focus(self, field: str) -> None:
        if field not in FIELD_FORMATTERS:
            raise KeyError(field)
        if not self._ensure_editable():
            return
        self.focused = field
        if self.state is OverlayState.IDLE:
            self.state = OverlayState.FOCUS_TRACKING

    def change(self, field: str, raw: str) -> str:
        """Store the formatted value for ``field`` and revalidate it as the user types."""
        formatter = FIELD_FORMATTERS[field]
        if not self._ensure_editable():
            return self.values[field]
        value = formatter(raw)
        self.values[field] = value
        error = validate_field(field, value, now=self._clock())
        if error is None:
            self.errors.pop(field, None)
        else:
            self.errors[field] = error.message
        return value

    @property
    def preview(self) -> CardPreview:
        return CardPreview(
            card_number=self.values["cardNumber"] or CARD_NUMBER_PLACEHOLDER,
            expiry_date=self.values["expiryDate"] or EXPIRY_PLACEHOLDER,
            cvv=self.values["cvv"] if self.focused == "cvv" else CVV_PLACEHOLDER,
        )

    def payload(self) -> dict[str, str]:
        return {
            **self.values,
            "accountId": self.account.id,
            "accountType": self.account.type.value,
        }

    async def submit(self) -> bool:
        """Validate and post the form. Returns True once the payment was accepted."""
        if not self._ensure_editable():
            logger.debug("Ignoring submit while overlay is %s", self.state.value)
            return False

        field_errors = validate_payment_fields(self.values, now=self._clock())
        self.errors = {error.field: error.message for error in field_errors}
        if field_errors:
            return False

        previous = self.state
        self.state = OverlayState.SUBMITTING
        self.payment_error = None
        self.toasts.loading("Processing payment...", toast_id=PROCESSING_TOAST_ID)
        try:
            await self._submit_payment(self.payload())
        except PaymentRequestError as exc:
            self._fail(exc.message)
            return False
        except httpx.HTTPError as exc:
            logger.error("Payment request failed: %s", exc)
            self._fail(DEFAULT_PAYMENT_ERROR)
            return False
        except Exception:
            self.state = previous
            self.toasts.dismiss(PROCESSING_TOAST_ID)
            raise

        self.toasts.dismiss(PROCESSING_TOAST_ID)
        self.toasts.success("Payment successful! 🎉", auto_close_ms=3000)
        self._finish()
        return True

    def _fail(self, message: str) -> None:
        self.payment_error = message
        self.toasts.dismiss(PROCESSING_TOAST_ID)
        self.toasts.error(message, auto_close_ms=5000)
        self.state = OverlayState.ERROR

    def close(self) -> None:
        """Cancel the overlay; ignored while a submission is in flight."""
        if self.state is OverlayState.SUBMITTING:
            return
        if self.state is OverlayState.CLOSED:
            return
        self._finish()

    def _finish(self) -> None:
        self._reset()
        self.state = OverlayState.CLOSED
        if self._on_close is not None:
            self._on_close()
