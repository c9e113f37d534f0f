"""Request logging middleware.

Emits one structured log line per request with method, path, status,
latency and client address. The request id is attached by the structlog
context set in RequestIDMiddleware.
"""

import time
from typing import TYPE_CHECKING, Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from src.presentation.routers.api.middleware.client_ip import get_client_ip

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Starlette middleware logging each completed request."""

    def __init__(
        self,
        app: ASGIApp,
        logger: "LoggerProtocol | None" = None,
        trust_forwarded_for: bool = False,
    ) -> None:
        super().__init__(app)
        self._logger = logger
        self._trust_forwarded_for = trust_forwarded_for

    def _get_logger(self) -> "LoggerProtocol":
        if self._logger is None:
            from src.core.container import get_logger

            self._logger = get_logger()
        return self._logger

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = (time.perf_counter() - start) * 1000

        self._get_logger().info(
            "HTTP request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            latency_ms=round(latency_ms, 2),
            client_ip=get_client_ip(request, self._trust_forwarded_for),
        )
        return response
