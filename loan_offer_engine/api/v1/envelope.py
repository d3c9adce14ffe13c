"""Standardized response envelopes shared by every endpoint"""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

from loan_offer_engine.api.v1.schemas import ErrorData, ResponseEnvelope
from loan_offer_engine.config import settings
from loan_offer_engine.domain.models import ErrorCode

STATUS_SUCCESS = "SR"
STATUS_ERROR = "ER"


def success_response(data: Optional[Dict[str, Any]] = None, message: str = "Success") -> ResponseEnvelope:
    return ResponseEnvelope(data=data or {}, status_message=message, status_code=STATUS_SUCCESS)


def error_response(error_code: ErrorCode | str, error_message: str) -> ResponseEnvelope:
    code = error_code.value if isinstance(error_code, ErrorCode) else error_code
    data = ErrorData(error_message=error_message, error_code=code)
    return ResponseEnvelope(
        data=data.model_dump(by_alias=True),
        status_message="Error",
        status_code=STATUS_ERROR,
    )


def validation_error(error_message: str) -> ResponseEnvelope:
    return error_response(ErrorCode.MISSING_PARAMETER, error_message)


def auth_error(error_message: str) -> ResponseEnvelope:
    return error_response(ErrorCode.INVALID_TOKEN, error_message)


def server_error(error: Exception, environment: str | None = None) -> ResponseEnvelope:
    """Internal errors expose their message everywhere but production"""
    if (environment or settings.environment) == "production":
        message = "Internal server error"
    else:
        message = str(error) or "Unknown server error"
    return error_response(ErrorCode.SERVER_ERROR, message)


def redirection_response(redirection_url: str) -> ResponseEnvelope:
    """Accepted-offer envelope: empty error fields plus the redirect target"""
    data = ErrorData(redirection_url=redirection_url)
    return success_response(data.model_dump(by_alias=True))


def respond(envelope: ResponseEnvelope, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope.model_dump(by_alias=True))
