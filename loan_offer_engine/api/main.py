"""FastAPI application factory"""

from datetime import datetime, timezone
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from loan_offer_engine.api.middleware import RequestIDMiddleware, MetricsMiddleware
from loan_offer_engine.api.v1 import loan, loan_offer
from loan_offer_engine.api.v1.envelope import error_response, respond, validation_error
from loan_offer_engine.infrastructure.observability.logging import setup_logging
from loan_offer_engine.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Loan Offer Engine",
        description="Loan-offer validation, EMI and amortization service",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/api/health")
    def health_check():
        return {
            "status": "UP",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "environment": settings.environment,
        }

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Malformed bodies are reported in the envelope, not as FastAPI's 422
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return respond(validation_error("Request body is missing or malformed"), 400)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return respond(error_response("E404", "Requested resource not found"), 404)
        return respond(error_response(f"E{exc.status_code}", str(exc.detail)), exc.status_code)

    # Register API routers
    app.include_router(loan_offer.router, tags=["loan-offer"])
    app.include_router(loan.router, prefix="/api", tags=["loan"])

    return app


app = create_app()
