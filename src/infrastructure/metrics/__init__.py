"""Metrics collectors (prometheus_client)."""

from src.infrastructure.metrics.prometheus_metrics import (
    METRICS_CONTENT_TYPE,
    observe_request,
    render_latest,
    track_in_flight,
)

__all__ = [
    "METRICS_CONTENT_TYPE",
    "observe_request",
    "render_latest",
    "track_in_flight",
]
