"""Prometheus metrics for monitoring offer decisions, rejections and calculations"""

from typing import Optional
from prometheus_client import Counter, Histogram

# Decision metrics
offer_decision_counter = Counter(
    "loan_offer_decision_total",
    "Total loan-offer decisions made",
    ["outcome", "error_code"],  # accepted | rejected, E00x or ""
)

validation_request_counter = Counter(
    "loan_validation_total",
    "Standalone loan validation requests",
    ["result"],  # valid | invalid
)

# Calculator metrics
calculation_counter = Counter(
    "loan_calculation_total",
    "EMI and schedule calculations",
    ["result"],  # ok | invalid_input
)

schedule_length_histogram = Histogram(
    "loan_schedule_periods",
    "Number of periods in generated schedules",
    buckets=[3, 6, 12, 24, 36, 48, 60, 84, 120],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_offer_decision(accepted: bool, error_code: Optional[str]) -> None:
    """Record decision metrics for monitoring acceptance rates and rejection reasons"""
    outcome = "accepted" if accepted else "rejected"
    offer_decision_counter.labels(outcome=outcome, error_code=error_code or "").inc()


def record_calculation(periods: Optional[int]) -> None:
    """Record a calculator call; periods is None when the inputs were rejected"""
    if periods is None:
        calculation_counter.labels(result="invalid_input").inc()
        return

    calculation_counter.labels(result="ok").inc()
    schedule_length_histogram.observe(periods)
