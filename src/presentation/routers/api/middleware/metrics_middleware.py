"""Prometheus request metrics middleware.

Records an in-flight gauge, a request counter and a latency histogram.
Requests are labelled by route template (``/api/v1/users/{user_id}``), not
the raw path, so label cardinality stays bounded. Paths that match no
route are labelled ``unmatched``.
"""

import time
from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from src.infrastructure.metrics import observe_request, track_in_flight

UNMATCHED_ENDPOINT = "unmatched"


def _route_template(request: Request) -> str:
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path if isinstance(path, str) else UNMATCHED_ENDPOINT


class MetricsMiddleware(BaseHTTPMiddleware):
    """Starlette middleware exporting per-request Prometheus metrics."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        status_code = 500
        with track_in_flight() as start:
            try:
                response = await call_next(request)
                status_code = response.status_code
                return response
            finally:
                observe_request(
                    method=request.method,
                    endpoint=_route_template(request),
                    status=status_code,
                    duration=time.perf_counter() - start,
                )
