"""Integration tests for API endpoints"""

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient
from loan_offer_engine.api.dependencies import get_evaluator
from loan_offer_engine.domain.evaluator import LoanOfferEvaluator
from loan_offer_engine.domain.models import LoanLimits

LOAN_OFFER_URL = "/fkApiServices.do?action=loanOffer"
TOKEN = "a" * 32


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "UP"
    assert "X-Request-ID" in response.headers


def test_metrics_endpoint(client: TestClient, valid_request):
    """Test Prometheus metrics endpoint"""
    client.post(LOAN_OFFER_URL, json={"token": TOKEN, "data": valid_request})

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "loan_offer_decision_total" in response.text


def test_loan_offer_accepted(client: TestClient, valid_request):
    """Test POST loanOffer with a valid request returns an empty success payload"""
    response = client.post(LOAN_OFFER_URL, json={"token": TOKEN, "data": valid_request})

    assert response.status_code == 200
    body = response.json()
    assert body["statusCode"] == "SR"
    assert body["statusMessage"] == "Success"
    assert body["data"] == {
        "errorMessage": "",
        "errorCode": "",
        "redirectionURL": "https://merchant.example/return",
    }


def test_loan_offer_rejected_amount(client: TestClient, valid_request):
    valid_request["loanAmount"] = 500

    response = client.post(LOAN_OFFER_URL, json={"token": TOKEN, "data": valid_request})

    assert response.status_code == 400
    body = response.json()
    assert body["statusCode"] == "ER"
    assert body["data"]["errorCode"] == "E003"
    assert body["data"]["errorMessage"] == "Loan amount must be between 10000 and 10000000"
    assert body["data"]["redirectionURL"] == ""


def test_loan_offer_invalid_order_id(client: TestClient, valid_request):
    valid_request["orderId"] = "ORD123"

    response = client.post(LOAN_OFFER_URL, json={"token": TOKEN, "data": valid_request})

    assert response.status_code == 400
    assert response.json()["data"]["errorCode"] == "E005"


def test_loan_offer_missing_token(client: TestClient, valid_request):
    response = client.post(LOAN_OFFER_URL, json={"data": valid_request})

    assert response.status_code == 401
    assert response.json()["data"]["errorCode"] == "E001"
    assert response.json()["data"]["errorMessage"] == "Authentication token is missing"


def test_loan_offer_invalid_token(client: TestClient, valid_request):
    response = client.post(LOAN_OFFER_URL, json={"token": "short", "data": valid_request})

    assert response.status_code == 401
    assert response.json()["data"]["errorMessage"] == "Invalid or expired token"


def test_loan_offer_missing_data(client: TestClient):
    response = client.post(LOAN_OFFER_URL, json={"token": TOKEN})

    assert response.status_code == 400
    assert response.json()["data"]["errorCode"] == "E002"
    assert response.json()["data"]["errorMessage"] == "Loan request data is missing"


def test_loan_offer_unsupported_action(client: TestClient, valid_request):
    response = client.post("/fkApiServices.do?action=other", json={"token": TOKEN, "data": valid_request})

    assert response.status_code == 400
    assert response.json()["data"]["errorMessage"] == "Unsupported action parameter"


def test_loan_offer_malformed_body(client: TestClient):
    response = client.post(LOAN_OFFER_URL, json={"token": TOKEN, "data": [1, 2, 3]})

    assert response.status_code == 400
    assert response.json()["statusCode"] == "ER"


def test_loan_offer_uses_overridden_limits(client: TestClient, valid_request):
    """Test alternate bounds injected through dependency overrides"""
    client.app.dependency_overrides[get_evaluator] = lambda: LoanOfferEvaluator(LoanLimits(max_amount=50_000))

    response = client.post(LOAN_OFFER_URL, json={"token": TOKEN, "data": valid_request})

    assert response.status_code == 400
    assert response.json()["data"]["errorMessage"] == "Loan amount must be between 10000 and 50000"


@patch("loan_offer_engine.domain.evaluator.LoanOfferEvaluator.evaluate")
def test_loan_offer_unexpected_error(mock_evaluate, client: TestClient, valid_request):
    mock_evaluate.side_effect = RuntimeError("boom")

    response = client.post(LOAN_OFFER_URL, json={"token": TOKEN, "data": valid_request})

    assert response.status_code == 500
    assert response.json()["data"]["errorCode"] == "E999"


def test_validate_endpoint_valid(client: TestClient, valid_request):
    response = client.post("/api/loan/validate", json={"token": TOKEN, "data": valid_request})

    assert response.status_code == 200
    assert response.json()["data"] == {"message": "Loan details are valid", "valid": True}


def test_validate_endpoint_invalid(client: TestClient, valid_request):
    valid_request["roi"] = 30

    response = client.post("/api/loan/validate", json={"token": TOKEN, "data": valid_request})

    assert response.status_code == 400
    assert response.json()["data"]["errorCode"] == "E006"
    assert response.json()["data"]["errorMessage"] == "ROI must be between 5.5% and 24%"


def test_validate_endpoint_requires_token(client: TestClient, valid_request):
    response = client.post("/api/loan/validate", json={"data": valid_request})
    assert response.status_code == 401


def test_calculate_endpoint(client: TestClient):
    """Test POST /api/loan/calculate returns EMI, totals and schedule"""
    response = client.post("/api/loan/calculate", json={"loanAmount": 100000, "roi": 12, "tenure": 12})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["emi"] == 8884.88
    assert len(data["schedule"]) == 12
    assert data["schedule"][0] == {
        "month": 1,
        "emi": 8884.88,
        "principalPaid": 7884.88,
        "interestPaid": 1000.0,
        "balance": 92115.12,
    }
    assert data["schedule"][-1]["balance"] == 0.0
    assert data["totalInterest"] == pytest.approx(data["totalAmount"] - 100000, abs=0.01)


def test_calculate_endpoint_accepts_numeric_strings(client: TestClient):
    response = client.post("/api/loan/calculate", json={"loanAmount": "100000", "roi": "12", "tenure": "12"})

    assert response.status_code == 200
    assert response.json()["data"]["emi"] == 8884.88


def test_calculate_endpoint_missing_parameter(client: TestClient):
    response = client.post("/api/loan/calculate", json={"loanAmount": 100000, "roi": 12})

    assert response.status_code == 400
    assert response.json()["data"]["errorMessage"] == "Missing required parameters: loanAmount, roi, tenure"


def test_calculate_endpoint_non_numeric(client: TestClient):
    response = client.post("/api/loan/calculate", json={"loanAmount": "lots", "roi": 12, "tenure": 12})

    assert response.status_code == 400
    assert response.json()["data"]["errorMessage"] == "Invalid numeric parameters provided"


def test_calculate_endpoint_degenerate_rate(client: TestClient):
    response = client.post("/api/loan/calculate", json={"loanAmount": 100000, "roi": 0, "tenure": 12})

    assert response.status_code == 400
    assert response.json()["data"]["errorCode"] == "E007"


def test_unknown_route_returns_envelope(client: TestClient):
    response = client.get("/does/not/exist")

    assert response.status_code == 404
    assert response.json()["data"]["errorCode"] == "E404"
    assert response.json()["data"]["errorMessage"] == "Requested resource not found"


def test_loan_offer_non_string_redirect_url(client: TestClient, valid_request):
    """Test a numeric redirect URL is echoed back as text instead of breaking the envelope"""
    valid_request["backRedirectionURL"] = 123

    response = client.post(LOAN_OFFER_URL, json={"token": TOKEN, "data": valid_request})

    assert response.status_code == 200
    assert response.json()["data"]["redirectionURL"] == "123"


def test_calculate_endpoint_large_principal(client: TestClient):
    response = client.post("/api/loan/calculate", json={"loanAmount": 1e28, "roi": 12, "tenure": 12})

    assert response.status_code == 200
    assert response.json()["data"]["emi"] == pytest.approx(8.884878867e26, rel=1e-9)


def test_request_id_propagated_from_caller(client: TestClient):
    response = client.get("/api/health", headers={"X-Request-ID": "trace-abc.123"})
    assert response.headers["X-Request-ID"] == "trace-abc.123"


def test_request_id_minted_for_malformed_header(client: TestClient):
    response = client.get("/api/health", headers={"X-Request-ID": "bad id with spaces"})

    assert response.headers["X-Request-ID"] != "bad id with spaces"
    assert len(response.headers["X-Request-ID"]) == 36
