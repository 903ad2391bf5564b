import pytest

from utility_dashboard.core.config import Settings
from utility_dashboard.interfaces.http.deps import get_payment_service
from utility_dashboard.main import create_app


def test_get_accounts_returns_seed_list(client):
    response = client.get("/api/getAccounts")
    assert response.status_code == 200
    accounts = response.json()
    assert [account["id"] for account in accounts] == [f"A-000{n}" for n in range(1, 10)]
    assert accounts[0] == {
        "id": "A-0001",
        "type": "ELECTRICITY",
        "balance": 30,
        "address": "1 Greville Ct, Thomastown, 3076, Victoria",
    }
    assert {account["type"] for account in accounts} == {"ELECTRICITY", "GAS"}


def test_get_accounts_ignores_query_parameters(client):
    response = client.get("/api/getAccounts", params={"type": "GAS"})
    assert response.status_code == 200
    assert len(response.json()) == 9


def test_process_payment_success(client, valid_payment):
    response = client.post("/api/processPayment", json=valid_payment)
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Payment processed successfully"}


def test_process_payment_accepts_unformatted_card_number(client, valid_payment):
    valid_payment["cardNumber"] = "5555555555554444"
    response = client.post("/api/processPayment", json=valid_payment)
    assert response.status_code == 200


def test_process_payment_rejects_negative_amount(client, valid_payment):
    valid_payment["amount"] = "-5"
    response = client.post("/api/processPayment", json=valid_payment)
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Invalid payment data"
    assert body["errors"] == [
        {"path": ["amount"], "message": "Amount must be a number with up to 2 decimal places"}
    ]


@pytest.mark.parametrize(
    ("field", "value", "message"),
    [
        ("cardNumber", "4242424242424241", "Please enter a valid card number"),
        ("expiryDate", "13/99", "Invalid expiry date"),
        ("expiryDate", "01/20", "Invalid expiry date"),
        ("cvv", "12", "CVV must be 3 or 4 digits"),
        ("cvv", "12345", "CVV must be 3 or 4 digits"),
        ("amount", "0", "Amount must be greater than 0"),
    ],
)
def test_process_payment_field_errors(client, valid_payment, field, value, message):
    valid_payment[field] = value
    response = client.post("/api/processPayment", json=valid_payment)
    assert response.status_code == 400
    assert response.json()["errors"] == [{"path": [field], "message": message}]


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("amount", "50.00\n"),
        ("amount", "٥٠"),
        ("expiryDate", "12/99\n"),
        ("expiryDate", "١٢/٩٩"),
        ("cvv", "123\n"),
        ("cvv", "١٢٣"),
    ],
)
def test_process_payment_rejects_trailing_newline_and_non_ascii_digits(client, valid_payment, field, value):
    valid_payment[field] = value
    response = client.post("/api/processPayment", json=valid_payment)
    assert response.status_code == 400
    assert [error["path"] for error in response.json()["errors"]] == [[field]]


def test_process_payment_reports_missing_fields(client):
    response = client.post("/api/processPayment", json={"amount": "10"})
    assert response.status_code == 400
    paths = [error["path"] for error in response.json()["errors"]]
    assert paths == [["cardNumber"], ["expiryDate"], ["cvv"], ["accountId"], ["accountType"]]


def test_process_payment_rejects_unknown_account_type(client, valid_payment):
    valid_payment["accountType"] = "WATER"
    response = client.post("/api/processPayment", json=valid_payment)
    assert response.status_code == 400
    assert response.json()["errors"][0]["path"] == ["accountType"]


def test_process_payment_rejects_non_string_amount(client, valid_payment):
    valid_payment["amount"] = 50
    response = client.post("/api/processPayment", json=valid_payment)
    assert response.status_code == 400
    assert response.json()["errors"][0]["path"] == ["amount"]


def test_process_payment_does_not_check_account_exists(client, valid_payment):
    valid_payment["accountId"] = "A-9999"
    response = client.post("/api/processPayment", json=valid_payment)
    assert response.status_code == 200


def test_process_payment_malformed_json_is_server_error(client):
    response = client.post(
        "/api/processPayment",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Payment processing failed"}


def test_process_payment_unexpected_failure_hides_detail(app, client, valid_payment):
    class ExplodingPaymentService:
        async def process(self, payment):
            raise RuntimeError("ledger exploded")

    app.dependency_overrides[get_payment_service] = ExplodingPaymentService
    response = client.post("/api/processPayment", json=valid_payment)
    assert response.status_code == 500
    assert "ledger" not in response.text


def test_process_payment_never_changes_balances(client, valid_payment):
    before = client.get("/api/getAccounts").json()
    client.post("/api/processPayment", json=valid_payment)
    assert client.get("/api/getAccounts").json() == before


def test_dashboard_page_renders(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "My Accounts" in response.text
    for tag in ("ALL", "ELECTRICITY", "GAS"):
        assert f'data-filter="{tag}"' in response.text
    assert "/static/js/dashboard.js?v=" in response.text


def test_static_assets_are_served(client):
    response = client.get("/static/js/formatters.js")
    assert response.status_code == 200
    assert "formatCardNumber" in response.text


def test_openapi_documents_payment_responses(client):
    spec = client.get("/openapi.json").json()
    responses = spec["paths"]["/api/processPayment"]["post"]["responses"]
    assert {"200", "400", "500"} <= set(responses)
    assert "/api/getAccounts" in spec["paths"]


def test_custom_api_prefix():
    app = create_app(Settings(api_prefix="/v2", accounts={"latency_ms": 0}))
    paths = {route.path for route in app.routes}
    assert "/v2/getAccounts" in paths
    assert "/v2/processPayment" in paths
