"""Pytest fixtures for the dashboard API and client tests."""

from datetime import datetime

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from utility_dashboard.core.config import AccountsSettings, Settings
from utility_dashboard.main import create_app

FIXED_NOW = datetime(2026, 10, 18, 12, 0, 0)

VALID_PAYMENT = {
    "amount": "50.00",
    "cardNumber": "4242 4242 4242 4242",
    "expiryDate": "12/99",
    "cvv": "123",
    "accountId": "A-0001",
    "accountType": "ELECTRICITY",
}


@pytest.fixture
def settings() -> Settings:
    """Test settings without the simulated listing latency."""
    return Settings(environment="test", accounts=AccountsSettings(latency_ms=0))


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def http_client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
        yield http


@pytest.fixture
def valid_payment() -> dict[str, str]:
    return dict(VALID_PAYMENT)
