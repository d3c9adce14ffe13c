"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from loan_offer_engine.config import settings
from loan_offer_engine.domain.evaluator import LoanOfferEvaluator
from loan_offer_engine.infrastructure.auth import TokenAuthenticator


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_evaluator() -> LoanOfferEvaluator:
    """Provide an evaluator bound to the configured loan limits"""
    return LoanOfferEvaluator(settings.loan_limits())


def get_authenticator() -> TokenAuthenticator:
    """Provide the token authentication collaborator"""
    return TokenAuthenticator()
