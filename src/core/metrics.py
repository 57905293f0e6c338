"""Prometheus metrics for the Self Savings Planner service.

Metrics are organized into two categories:

Business Metrics (for Product/Finance):
- savings_transactions_parsed_total: Expenses rounded up
- savings_validation_total: Validated transactions by outcome and reason
- savings_projection_total: Returns projections by instrument
- savings_invested_amount: Invested principal per bucket by instrument

Technical Metrics (for Engineering/SRE):
- savings_projection_latency_seconds: Engine time per projection
- savings_http_requests_total: HTTP requests by endpoint/status
- savings_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics (Product/Finance dashboards)
# =============================================================================

transactions_parsed_total = Counter(
    "savings_transactions_parsed_total",
    "Total number of expenses rounded up",
)

validation_total = Counter(
    "savings_validation_total",
    "Total number of validated transactions",
    ["outcome", "reason"],  # valid/invalid, rejection reason or "accepted"
)

projection_total = Counter(
    "savings_projection_total",
    "Total number of returns projections",
    ["instrument"],  # nps, index
)

invested_amount = Histogram(
    "savings_invested_amount",
    "Invested principal per bucket period",
    ["instrument"],
    buckets=[0, 50, 100, 250, 500, 1000, 5000, 10000, 50000],
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

projection_latency = Histogram(
    "savings_projection_latency_seconds",
    "Returns projection latency in seconds",
    ["instrument"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0],
)

http_requests_total = Counter(
    "savings_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "savings_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_parsed(count: int) -> None:
    """Record a batch of parsed expenses."""
    transactions_parsed_total.inc(count)


def record_validation(valid_count: int, invalid_reasons: list[str]) -> None:
    """Record the outcome of a validation run."""
    if valid_count:
        validation_total.labels(outcome="valid", reason="accepted").inc(valid_count)
    for reason in invalid_reasons:
        validation_total.labels(outcome="invalid", reason=reason).inc()


def record_projection(instrument: str, invested: list[float]) -> None:
    """Record a projection and the principal of each bucket."""
    projection_total.labels(instrument=instrument).inc()
    for amount in invested:
        invested_amount.labels(instrument=instrument).observe(amount)


@contextmanager
def track_projection_latency(instrument: str) -> Generator[None, None, None]:
    """Context manager to track projection latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        projection_latency.labels(instrument=instrument).observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
