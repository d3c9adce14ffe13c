"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "loan-offer-engine"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_offer_decision(
    request_id: str,
    identity: Optional[str],
    accepted: bool,
    error_code: Optional[str],
    duration_ms: float,
) -> None:
    """Log structured loan-offer outcome for analysis"""
    logging.info(
        "Loan offer evaluated",
        extra={
            "request_id": request_id,
            "identity": identity,
            "step": "loan_offer_complete",
            "outcome": "accepted" if accepted else "rejected",
            "error_code": error_code or "",
            "duration_ms": duration_ms,
        },
    )
