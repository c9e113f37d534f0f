"""Prometheus HTTP request collectors.

Module-level collectors registered in the default registry, exposed by the
``/metrics`` route via ``render_latest``.

Metrics:
    http_requests_total{method, endpoint, status}
    http_request_duration_seconds{method, endpoint, status}
    http_requests_in_flight
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

REQUESTS_TOTAL = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    labelnames=("method", "endpoint", "status"),
)
REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    labelnames=("method", "endpoint", "status"),
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
REQUESTS_IN_FLIGHT = Gauge(
    "http_requests_in_flight",
    "Number of HTTP requests currently being served",
)

METRICS_CONTENT_TYPE = CONTENT_TYPE_LATEST


def observe_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record one finished request."""
    labels = {"method": method, "endpoint": endpoint, "status": str(status)}
    REQUESTS_TOTAL.labels(**labels).inc()
    REQUEST_DURATION.labels(**labels).observe(duration)


@contextmanager
def track_in_flight() -> Iterator[float]:
    """Count the request as in flight; yields the perf_counter start time."""
    REQUESTS_IN_FLIGHT.inc()
    start = time.perf_counter()
    try:
        yield start
    finally:
        REQUESTS_IN_FLIGHT.dec()


def render_latest() -> bytes:
    """Serialize the default registry in Prometheus text format."""
    return generate_latest()


__all__ = [
    "METRICS_CONTENT_TYPE",
    "REQUESTS_IN_FLIGHT",
    "REQUESTS_TOTAL",
    "REQUEST_DURATION",
    "observe_request",
    "render_latest",
    "track_in_flight",
]
