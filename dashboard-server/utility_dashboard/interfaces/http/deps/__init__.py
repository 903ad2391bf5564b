"""Reusable FastAPI dependencies."""

from .account import get_account_service, get_app_container, get_payment_service

__all__ = [
    "get_account_service",
    "get_app_container",
    "get_payment_service",
]
