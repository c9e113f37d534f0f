"""Request ID middleware to correlate logs per request.

- Reuses an inbound X-Request-ID header or mints a UUID4
- Stores the id in a context var, on ``request.state.request_id`` and in the
  structlog context (every log line of the request carries it)
- Echoes the id in the X-Request-ID response header
- Exposes get_request_id() for code outside request handlers
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

request_id_context: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return request_id_context.get()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that assigns a correlation id to each request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        token = request_id_context.set(request_id)
        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            # Clear context after request to prevent leakage
            structlog.contextvars.unbind_contextvars("request_id")
            request_id_context.reset(token)
