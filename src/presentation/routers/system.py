"""System router for non-versioned application endpoints.

Lightweight, side-effect free endpoints for liveness checks and metric
scraping. Neither requires authentication, and neither is audited.
"""

from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response

from src.core.config import get_settings
from src.infrastructure.metrics import METRICS_CONTENT_TYPE, render_latest
from src.schemas.common_schemas import success_response

system_router = APIRouter(tags=["System"])


@system_router.get("/health")
async def health() -> JSONResponse:
    """Health check endpoint for monitoring and load balancers."""
    settings = get_settings()
    return success_response(
        f"Server is running in {settings.environment.value} mode",
        {
            "status": "ok",
            "version": settings.app_version,
            "time": datetime.now(UTC).isoformat(),
        },
    )


@system_router.get("/metrics")
async def metrics() -> Response:
    """Prometheus scrape endpoint."""
    return Response(content=render_latest(), media_type=METRICS_CONTENT_TYPE)
