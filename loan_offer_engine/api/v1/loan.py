"""POST /api/loan/validate and /api/loan/calculate - standalone loan tools"""

import math
import logging
from typing import Any, Optional
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from loan_offer_engine.api.v1.schemas import CalculateRequest, CalculationData, LoanOfferRequest
from loan_offer_engine.api.v1.envelope import (
    auth_error,
    error_response,
    respond,
    server_error,
    success_response,
    validation_error,
)
from loan_offer_engine.api.dependencies import get_authenticator, get_evaluator, get_request_id
from loan_offer_engine.domain.evaluator import LoanOfferEvaluator
from loan_offer_engine.domain.exceptions import InvalidInputError
from loan_offer_engine.domain.models import ErrorCode
from loan_offer_engine.infrastructure.auth import TokenAuthenticator
from loan_offer_engine.infrastructure.observability.metrics import (
    record_calculation,
    validation_request_counter,
)

router = APIRouter()


def _parse_number(value: Any) -> Optional[float]:
    """Lenient numeric parsing: accepts numbers and numeric strings"""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


@router.post("/loan/validate")
def validate_loan_details(
    request_body: LoanOfferRequest,
    evaluator: LoanOfferEvaluator = Depends(get_evaluator),
    authenticator: TokenAuthenticator = Depends(get_authenticator),
) -> JSONResponse:
    """
    Validate loan fields without making an offer decision.

    Returns:
        200 with {"message": ..., "valid": true}, or 400 with the first failing rule
    """
    if not request_body.token:
        return respond(auth_error("Authentication token is missing"), 401)

    if not authenticator.verify(request_body.token).authenticated:
        return respond(auth_error("Invalid or expired token"), 401)

    if request_body.data is None:
        return respond(validation_error("Loan data is missing"), 400)

    result = evaluator.validate(request_body.data)
    if not result.is_valid:
        validation_request_counter.labels(result="invalid").inc()
        return respond(error_response(result.error_code, result.message), 400)

    validation_request_counter.labels(result="valid").inc()
    return respond(success_response({"message": "Loan details are valid", "valid": True}), 200)


@router.post("/loan/calculate")
def calculate_loan_details(
    request_body: CalculateRequest,
    request: Request,
    evaluator: LoanOfferEvaluator = Depends(get_evaluator),
) -> JSONResponse:
    """
    Calculate EMI, totals and the amortization schedule.

    Numeric strings are accepted; tenure is truncated to whole months.
    """
    raw_values = (request_body.loan_amount, request_body.roi, request_body.tenure)
    if any(value is None or value == "" for value in raw_values):
        return respond(validation_error("Missing required parameters: loanAmount, roi, tenure"), 400)

    loan_amount, roi, tenure = (_parse_number(value) for value in raw_values)
    if loan_amount is None or roi is None or tenure is None:
        return respond(validation_error("Invalid numeric parameters provided"), 400)

    try:
        quote = evaluator.quote(loan_amount, roi, int(tenure))
    except InvalidInputError as e:
        record_calculation(None)
        return respond(error_response(ErrorCode.INVALID_INPUT, str(e)), 400)
    except Exception as e:
        logging.error(f"Error calculating loan details: {e}", extra={"request_id": get_request_id(request)})
        return respond(server_error(e), 500)

    record_calculation(len(quote.schedule))
    data = CalculationData.from_quote(quote)
    return respond(success_response(data.model_dump(by_alias=True)), 200)
