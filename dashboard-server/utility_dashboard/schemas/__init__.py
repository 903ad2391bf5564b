"""Pydantic schemas used across the project."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from utility_dashboard.modules.accounts.models import AccountType
from utility_dashboard.modules.payments.models import PaymentInput


class AccountResponse(BaseModel):
    id: str = Field(..., description="The unique identifier for the account", examples=["A-0001"])
    type: AccountType = Field(..., description="The type of utility account")
    balance: float = Field(..., description="The current balance of the account", examples=[30])
    address: str = Field(
        ...,
        description="The service address for the account",
        examples=["1 Greville Ct, Thomastown, 3076, Victoria"],
    )

    model_config = ConfigDict(from_attributes=True)


class PaymentRequest(BaseModel):
    """Structural shape of a payment submission; field rules are checked afterwards."""

    amount: str = Field(..., description="Payment amount with up to 2 decimal places", examples=["50.00"])
    card_number: str = Field(..., alias="cardNumber", description="Credit card number", examples=["4242424242424242"])
    expiry_date: str = Field(..., alias="expiryDate", description="Card expiry date in MM/YY format", examples=["12/29"])
    cvv: str = Field(..., description="Card verification value (3-4 digits)", examples=["123"])
    account_id: str = Field(..., alias="accountId", description="The utility account ID", examples=["A-0001"])
    account_type: AccountType = Field(..., alias="accountType", description="The type of utility account")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_domain(self) -> PaymentInput:
        return PaymentInput(
            amount=self.amount,
            card_number=self.card_number,
            expiry_date=self.expiry_date,
            cvv=self.cvv,
            account_id=self.account_id,
            account_type=self.account_type,
        )


class ValidationIssue(BaseModel):
    path: list[str | int]
    message: str


class PaymentResponse(BaseModel):
    success: bool = Field(..., description="Whether the payment was successful")
    message: str = Field(..., description="Response message")


class PaymentErrorResponse(BaseModel):
    success: bool = Field(False, description="Always false for errors")
    message: str = Field(..., description="Error message")
    errors: Optional[list[ValidationIssue]] = Field(None, description="Validation errors if any")


__all__ = [
    "AccountResponse",
    "PaymentErrorResponse",
    "PaymentRequest",
    "PaymentResponse",
    "ValidationIssue",
]
