"""Security headers middleware.

Adds defensive response headers to every response, including error and
rate-limit responses produced further down the chain.
"""

from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Content-Security-Policy": "default-src 'self'",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
}

HSTS_HEADER = "Strict-Transport-Security"
HSTS_VALUE = "max-age=31536000; includeSubDomains"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that sets security headers.

    Args:
        app: The ASGI application to wrap.
        hsts_enabled: Also send Strict-Transport-Security (HTTPS deployments).
    """

    def __init__(self, app: ASGIApp, hsts_enabled: bool = False) -> None:
        super().__init__(app)
        self._headers = dict(SECURITY_HEADERS)
        if hsts_enabled:
            self._headers[HSTS_HEADER] = HSTS_VALUE

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response = await call_next(request)
        for name, value in self._headers.items():
            response.headers[name] = value
        return response
