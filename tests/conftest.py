"""Pytest fixtures for testing"""

import pytest
from typing import Any, Dict
from fastapi.testclient import TestClient
from loan_offer_engine.api.main import create_app
from loan_offer_engine.api.dependencies import get_authenticator, get_evaluator
from loan_offer_engine.domain.evaluator import LoanOfferEvaluator
from loan_offer_engine.domain.models import LoanLimits
from loan_offer_engine.infrastructure.auth import TokenAuthenticator

TEST_SECRET = "test-secret"


@pytest.fixture
def limits() -> LoanLimits:
    """Default business limits (10k-10M, 3-84 months, 5.5-24%)"""
    return LoanLimits()


@pytest.fixture
def valid_request() -> Dict[str, Any]:
    """A loan-offer field map that passes every rule"""
    return {
        "orderId": "ORD1234567",
        "transactionId": "TXN98765",
        "loanAmount": 100000,
        "roi": 12,
        "tenure": 12,
        "downpayment": 5000,
        "processingFee": 499,
        "externalTransactionId": "EXT-0001",
        "backRedirectionURL": "https://merchant.example/return",
    }


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with deterministic auth and default limits"""
    app = create_app()

    app.dependency_overrides[get_authenticator] = lambda: TokenAuthenticator(secret=TEST_SECRET, min_length=32)
    app.dependency_overrides[get_evaluator] = lambda: LoanOfferEvaluator(LoanLimits())
    return TestClient(app)
