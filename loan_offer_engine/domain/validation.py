"""Loan-offer request validation against configured business limits"""

import re
from typing import Any, Mapping, Optional

from loan_offer_engine.domain.models import ErrorCode, LoanLimits, ValidationResult
from loan_offer_engine.utils.money import format_amount, is_number

REQUIRED_FIELDS = (
    "orderId",
    "transactionId",
    "loanAmount",
    "roi",
    "tenure",
    "downpayment",
    "processingFee",
    "externalTransactionId",
)


class RequestValidator:
    """
    Checks one loan-offer field map and reports the first rule it breaks.

    Rules run in a fixed order and stop at the first failure:
    - all required fields present (absent or None counts as missing)
    - orderId format
    - transactionId format
    - loanAmount numeric and within [min_amount, max_amount]
    - tenure a whole number within [min_tenure, max_tenure]
    - roi numeric and within [min_roi, max_roi]
    - downpayment numeric and non-negative

    Errors are never aggregated and nothing is raised: every call returns a
    fresh ValidationResult.
    """

    def __init__(self, limits: LoanLimits):
        self.limits = limits
        self._order_id_re = re.compile(limits.order_id_pattern)
        self._transaction_id_re = re.compile(limits.transaction_id_pattern)

    def validate(self, data: Mapping[str, Any]) -> ValidationResult:
        failure = (
            self._check_required(data)
            or self._check_identifiers(data)
            or self._check_amount(data["loanAmount"])
            or self._check_tenure(data["tenure"])
            or self._check_roi(data["roi"])
            or self._check_downpayment(data["downpayment"])
        )
        return failure or ValidationResult.success()

    def _check_required(self, data: Mapping[str, Any]) -> Optional[ValidationResult]:
        for field in REQUIRED_FIELDS:
            if data.get(field) is None:
                return ValidationResult.failure(
                    ErrorCode.MISSING_PARAMETER,
                    f"Missing required parameter: {field}",
                )
        return None

    def _check_identifiers(self, data: Mapping[str, Any]) -> Optional[ValidationResult]:
        if not _matches(self._order_id_re, data["orderId"]):
            return ValidationResult.failure(ErrorCode.INVALID_FORMAT, "Order ID format is invalid")
        if not _matches(self._transaction_id_re, data["transactionId"]):
            return ValidationResult.failure(ErrorCode.INVALID_FORMAT, "Transaction ID format is invalid")
        return None

    def _check_amount(self, amount: Any) -> Optional[ValidationResult]:
        limits = self.limits
        if not is_number(amount) or not limits.min_amount <= amount <= limits.max_amount:
            return ValidationResult.failure(
                ErrorCode.INVALID_AMOUNT,
                f"Loan amount must be between {format_amount(limits.min_amount)} "
                f"and {format_amount(limits.max_amount)}",
            )
        return None

    def _check_tenure(self, tenure: Any) -> Optional[ValidationResult]:
        limits = self.limits
        if (
            not is_number(tenure)
            or tenure != int(tenure)
            or not limits.min_tenure <= tenure <= limits.max_tenure
        ):
            return ValidationResult.failure(
                ErrorCode.INVALID_TENURE,
                f"Tenure must be between {limits.min_tenure} and {limits.max_tenure} months",
            )
        return None

    def _check_roi(self, roi: Any) -> Optional[ValidationResult]:
        limits = self.limits
        if not is_number(roi) or not limits.min_roi <= roi <= limits.max_roi:
            return ValidationResult.failure(
                ErrorCode.INVALID_RATE,
                f"ROI must be between {format_amount(limits.min_roi)}% "
                f"and {format_amount(limits.max_roi)}%",
            )
        return None

    def _check_downpayment(self, downpayment: Any) -> Optional[ValidationResult]:
        if not is_number(downpayment) or downpayment < 0:
            return ValidationResult.failure(
                ErrorCode.INVALID_AMOUNT,
                "Downpayment must be a non-negative number",
            )
        return None


def _matches(pattern: re.Pattern, value: Any) -> bool:
    # fullmatch: a trailing newline must not slip past "$"
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def validate_loan_request(data: Mapping[str, Any], limits: LoanLimits | None = None) -> ValidationResult:
    """Validate a field map with the given (or default) limits"""
    return RequestValidator(limits or LoanLimits()).validate(data)
