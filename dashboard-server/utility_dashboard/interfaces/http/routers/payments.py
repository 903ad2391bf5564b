"""Payment validation endpoint."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from utility_dashboard.interfaces.http.deps import get_payment_service
from utility_dashboard.modules.payments import FieldError, PaymentInput, PaymentService, PaymentValidationError
from utility_dashboard.schemas import PaymentErrorResponse, PaymentRequest, PaymentResponse, ValidationIssue

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_PAYMENT_MESSAGE = "Invalid payment data"
PAYMENT_FAILED_MESSAGE = "Payment processing failed"


def parse_payment_request(body: Any) -> PaymentInput:
    """Check the request shape, reporting problems in the same form as the field rules."""
    try:
        payload = PaymentRequest.model_validate(body)
    except ValidationError as exc:
        raise PaymentValidationError(
            [FieldError(path=tuple(error["loc"]), message=error["msg"]) for error in exc.errors()]
        ) from exc
    return payload.to_domain()


def _error_response(status_code: int, message: str, errors: list[FieldError] | None = None) -> JSONResponse:
    content = PaymentErrorResponse(
        message=message,
        errors=[ValidationIssue(**error.to_payload()) for error in errors] if errors is not None else None,
    )
    return JSONResponse(status_code=status_code, content=content.model_dump(exclude_none=True))


@router.post(
    "/processPayment",
    response_model=PaymentResponse,
    summary="Process a utility bill payment",
    description="Processes a payment for a utility account using credit card details",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": PaymentErrorResponse, "description": "Invalid payment data"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": PaymentErrorResponse, "description": "Server error"},
    },
)
async def process_payment(
    request: Request,
    service: PaymentService = Depends(get_payment_service),
) -> PaymentResponse | JSONResponse:
    # Malformed JSON maps to the generic 500, not FastAPI's 422.
    try:
        body = await request.json()
        payment = parse_payment_request(body)
        result = await service.process(payment)
    except PaymentValidationError as exc:
        logger.warning("Payment rejected with %d validation error(s)", len(exc.errors))
        return _error_response(status.HTTP_400_BAD_REQUEST, INVALID_PAYMENT_MESSAGE, exc.errors)
    except Exception:
        logger.exception("Payment processing error")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, PAYMENT_FAILED_MESSAGE)
    return PaymentResponse(success=result.success, message=result.message)
