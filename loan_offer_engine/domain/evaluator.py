"""Loan-offer decision engine - validation plus calculator entry points"""

from typing import Any, List, Mapping

from loan_offer_engine.domain.amortization import generate_schedule, quote_loan
from loan_offer_engine.domain.emi import compute_emi
from loan_offer_engine.domain.models import (
    AmortizationEntry,
    AuthSignal,
    DecisionOutcome,
    ErrorCode,
    LoanDecision,
    LoanLimits,
    LoanQuote,
    LoanRequest,
    ValidationResult,
)
from loan_offer_engine.domain.validation import RequestValidator


class LoanOfferEvaluator:
    """
    Turns a loan-offer request into an accept/reject decision.

    Holds nothing but its limits and validator; each call is independent, so
    one instance can serve concurrent requests.
    """

    def __init__(self, limits: LoanLimits):
        self.limits = limits
        self.validator = RequestValidator(limits)

    def validate(self, data: Mapping[str, Any]) -> ValidationResult:
        return self.validator.validate(data)

    def evaluate(
        self,
        data: Mapping[str, Any],
        auth: AuthSignal,
        include_schedule: bool = False,
    ) -> LoanDecision:
        """
        Main entry point: authenticate, validate, decide.

        Flow:
        1. Unauthenticated caller -> rejected with INVALID_TOKEN
        2. First failing validation rule -> rejected with its code and message
        3. Otherwise accepted with an empty reason; the schedule is attached
           only when include_schedule is set
        """
        if not auth.authenticated:
            return LoanDecision(
                outcome=DecisionOutcome.REJECTED,
                reason="Invalid or expired token",
                error_code=ErrorCode.INVALID_TOKEN,
            )

        result = self.validator.validate(data)
        if not result.is_valid:
            return LoanDecision(
                outcome=DecisionOutcome.REJECTED,
                reason=result.message,
                error_code=result.error_code,
                identity=auth.identity,
            )

        request = LoanRequest.from_fields(data)
        schedule = None
        if include_schedule:
            schedule = generate_schedule(request.loan_amount, request.roi, request.tenure)

        return LoanDecision(
            outcome=DecisionOutcome.ACCEPTED,
            redirect_url=request.redirect_url or "",
            identity=auth.identity,
            schedule=schedule,
        )

    def compute_emi(self, principal: float, annual_rate_percent: float, term_months: int) -> float:
        return compute_emi(principal, annual_rate_percent, term_months)

    def compute_schedule(
        self, principal: float, annual_rate_percent: float, term_months: int
    ) -> List[AmortizationEntry]:
        return generate_schedule(principal, annual_rate_percent, term_months)

    def quote(self, principal: float, annual_rate_percent: float, term_months: int) -> LoanQuote:
        return quote_loan(principal, annual_rate_percent, term_months)
