"""HTTP client for the dashboard API."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from utility_dashboard.modules.accounts.models import EnergyAccount

from .exceptions import AccountListError, PaymentRequestError

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_ERROR = "Payment failed"


class DashboardApiClient:
    """Thin async wrapper over the two dashboard endpoints.

    The client never retries; a failed request surfaces directly to the caller.
    """

    def __init__(self, http: httpx.AsyncClient, *, api_prefix: str = "/api") -> None:
        self._http = http
        self._prefix = api_prefix.rstrip("/")

    @classmethod
    def for_base_url(cls, base_url: str, *, api_prefix: str = "/api", **client_kwargs: Any) -> "DashboardApiClient":
        return cls(httpx.AsyncClient(base_url=base_url, **client_kwargs), api_prefix=api_prefix)

    async def get_accounts(self) -> list[EnergyAccount]:
        response = await self._http.get(f"{self._prefix}/getAccounts")
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
            raise AccountListError(f"Expected a list of accounts, got {type(payload).__name__}")
        return [EnergyAccount.from_payload(item) for item in payload]

    async def process_payment(self, payload: Mapping[str, str]) -> str:
        """Submit a payment and return the server's confirmation message."""
        response = await self._http.post(f"{self._prefix}/processPayment", json=dict(payload))
        try:
            result = response.json()
        except ValueError:
            logger.warning("Payment endpoint returned a non-JSON body (status %s)", response.status_code)
            result = {}
        if not isinstance(result, dict):
            result = {}

        if response.is_error:
            raise PaymentRequestError(
                result.get("message") or DEFAULT_PAYMENT_ERROR,
                status_code=response.status_code,
                errors=result.get("errors") or (),
            )
        return result.get("message", "")

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "DashboardApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
