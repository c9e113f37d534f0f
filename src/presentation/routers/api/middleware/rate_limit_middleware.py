"""Rate limit middleware for FastAPI.

Applies the per-client token bucket to every request before anything
downstream runs. Rejected requests get HTTP 429 with a Retry-After header
and the standard envelope.

Architecture:
    Presentation Layer middleware that uses RateLimitProtocol (domain),
    implemented by InMemoryRateLimiter (infrastructure). The limiter
    instance is owned by the application and passed in at registration.

Usage:
    # In main.py
    limiter = InMemoryRateLimiter(rule)
    app.add_middleware(RateLimitMiddleware, rate_limiter=limiter)
"""

import math
from typing import TYPE_CHECKING, Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.presentation.routers.api.middleware.client_ip import get_client_ip

if TYPE_CHECKING:
    from src.domain.protocols import RateLimitProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol

RATE_LIMITED = DomainError(
    code=ErrorCode.RATE_LIMIT_EXCEEDED,
    message="Rate limit exceeded. Please try again later.",
)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Starlette middleware for rate limiting HTTP requests.

    Attributes:
        _rate_limiter: RateLimitProtocol implementation.
        _trust_forwarded_for: Take client identity from X-Forwarded-For.
        _logger: LoggerProtocol for structured logging (lazy loaded).
    """

    def __init__(
        self,
        app: ASGIApp,
        rate_limiter: "RateLimitProtocol",
        trust_forwarded_for: bool = False,
        logger: "LoggerProtocol | None" = None,
    ) -> None:
        """Initialize rate limit middleware.

        Args:
            app: The ASGI application to wrap.
            rate_limiter: Limiter deciding admission per client.
            trust_forwarded_for: Honor X-Forwarded-For for client identity.
            logger: Logger; defaults to the container logger.
        """
        super().__init__(app)
        self._rate_limiter = rate_limiter
        self._trust_forwarded_for = trust_forwarded_for
        self._logger = logger

    def _get_logger(self) -> "LoggerProtocol":
        """Lazy load logger from container."""
        if self._logger is None:
            from src.core.container import get_logger

            self._logger = get_logger()
        return self._logger

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Admit the request or answer 429.

        Returns:
            Response: Either rate limit error (429) or downstream response.
        """
        client_ip = get_client_ip(request, self._trust_forwarded_for)

        if not self._rate_limiter.allow(client_ip):
            self._get_logger().warning(
                "Rate limit exceeded",
                client_ip=client_ip,
                method=request.method,
                path=request.url.path,
            )
            return self._build_429_response()

        return await call_next(request)

    def _build_429_response(self) -> JSONResponse:
        """Build HTTP 429 response with a whole-second Retry-After."""
        from src.presentation.routers.api.v1.errors import ErrorResponseBuilder

        retry_after = max(1, math.ceil(self._rate_limiter.retry_after_seconds))
        return ErrorResponseBuilder.from_domain_error(
            RATE_LIMITED,
            headers={"Retry-After": str(retry_after)},
        )
