"""Service dependency providers."""

from fastapi import Depends, Request

from utility_dashboard.core.container import ApplicationContainer
from utility_dashboard.modules.accounts import AccountService
from utility_dashboard.modules.payments import PaymentService


def get_app_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_account_service(container: ApplicationContainer = Depends(get_app_container)) -> AccountService:
    return container.account_service


def get_payment_service(container: ApplicationContainer = Depends(get_app_container)) -> PaymentService:
    return container.payment_service


__all__ = [
    "get_account_service",
    "get_app_container",
    "get_payment_service",
]
