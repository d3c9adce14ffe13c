"""POST /fkApiServices.do?action=loanOffer - loan-offer decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from loan_offer_engine.api.v1.schemas import LoanOfferRequest
from loan_offer_engine.api.v1.envelope import (
    auth_error,
    error_response,
    redirection_response,
    respond,
    server_error,
    validation_error,
)
from loan_offer_engine.api.dependencies import get_authenticator, get_evaluator, get_request_id
from loan_offer_engine.domain.evaluator import LoanOfferEvaluator
from loan_offer_engine.infrastructure.auth import TokenAuthenticator
from loan_offer_engine.infrastructure.observability.metrics import record_offer_decision
from loan_offer_engine.infrastructure.observability.logging import log_offer_decision

LOAN_OFFER_ACTION = "loanOffer"

router = APIRouter()


@router.post("/fkApiServices.do")
def process_loan_offer(
    request_body: LoanOfferRequest,
    request: Request,
    action: str | None = Query(None),
    evaluator: LoanOfferEvaluator = Depends(get_evaluator),
    authenticator: TokenAuthenticator = Depends(get_authenticator),
) -> JSONResponse:
    """
    Accept or reject a loan offer.

    Flow:
    1. Dispatch on the action query parameter (only loanOffer is supported)
    2. Authenticate the body token
    3. Validate loan fields and decide
    4. Respond 200/SR with an empty error payload, or 400/ER with the first error
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    if action != LOAN_OFFER_ACTION:
        return respond(validation_error("Unsupported action parameter"), 400)

    if not request_body.token:
        return respond(auth_error("Authentication token is missing"), 401)

    auth = authenticator.verify(request_body.token)
    if not auth.authenticated:
        return respond(auth_error("Invalid or expired token"), 401)

    if request_body.data is None:
        return respond(validation_error("Loan request data is missing"), 400)

    try:
        decision = evaluator.evaluate(request_body.data, auth)
    except Exception as e:
        logging.error(f"Unexpected error processing loan offer: {e}", extra={"request_id": request_id})
        return respond(server_error(e), 500)

    error_code = decision.error_code.value if decision.error_code else None
    duration_ms = (time.perf_counter() - start_time) * 1000
    record_offer_decision(decision.accepted, error_code)
    log_offer_decision(request_id, decision.identity, decision.accepted, error_code, duration_ms)

    if not decision.accepted:
        return respond(error_response(decision.error_code, decision.reason), 400)

    return respond(redirection_response(decision.redirect_url), 200)
