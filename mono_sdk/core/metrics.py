"""Prometheus metrics for the Mono SDK.

Technical metrics for callers that scrape the default registry:
- mono_request_latency_seconds: Mono API request latency
- mono_request_total: Mono API requests by outcome
- mono_request_failures_total: Mono API failures by error type
- mono_validation_failures_total: Requests rejected before any network call
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Transport Metrics
# =============================================================================

request_latency = Histogram(
    "mono_request_latency_seconds",
    "Mono API request latency in seconds",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

request_total = Counter(
    "mono_request_total",
    "Total number of Mono API requests",
    ["status"],  # success, failure
)

request_failures = Counter(
    "mono_request_failures_total",
    "Total number of Mono API failures",
    ["error_type"],  # timeout, http_error, network, invalid_response
)


# =============================================================================
# Validation Metrics
# =============================================================================

validation_failures = Counter(
    "mono_validation_failures_total",
    "Requests rejected by local validation",
    ["field"],
)


# =============================================================================
# Helper Functions
# =============================================================================

@contextmanager
def track_request_latency() -> Generator[None, None, None]:
    """Context manager to track Mono API request latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        request_latency.observe(duration)


def record_request_success() -> None:
    """Record a successful Mono API request."""
    request_total.labels(status="success").inc()


def record_request_failure(error_type: str) -> None:
    """Record a failed Mono API request."""
    request_total.labels(status="failure").inc()
    request_failures.labels(error_type=error_type).inc()


def record_validation_failure(field: str) -> None:
    """Record a request rejected before reaching the network."""
    validation_failures.labels(field=field).inc()


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for a metrics response."""
    return CONTENT_TYPE_LATEST
