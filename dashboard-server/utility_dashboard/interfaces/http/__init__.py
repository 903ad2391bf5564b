from fastapi import APIRouter

from utility_dashboard.interfaces.http.routers import accounts, payments


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(accounts.router, tags=["Accounts"])
    router.include_router(payments.router, tags=["Payments"])
    return router


__all__ = [
    "create_api_router",
]
