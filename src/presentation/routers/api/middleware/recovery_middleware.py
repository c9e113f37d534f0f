"""Recovery middleware.

Last line of defence: any exception escaping a route handler or inner
middleware is logged with its traceback and turned into a uniform 500
envelope. Nothing about the failure reaches the caller.
"""

from typing import TYPE_CHECKING, Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from src.schemas.common_schemas import error_response

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol

RECOVERY_MESSAGE = "Internal server error"
RECOVERY_ERROR = "An unexpected error occurred"


class RecoveryMiddleware(BaseHTTPMiddleware):
    """Starlette middleware converting unhandled exceptions to HTTP 500."""

    def __init__(self, app: ASGIApp, logger: "LoggerProtocol | None" = None) -> None:
        super().__init__(app)
        self._logger = logger

    def _get_logger(self) -> "LoggerProtocol":
        if self._logger is None:
            from src.core.container import get_logger

            self._logger = get_logger()
        return self._logger

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            self._get_logger().error(
                "Unhandled exception",
                error=exc,
                method=request.method,
                path=request.url.path,
                exc_info=True,
            )
            return error_response(
                status_code=500,
                message=RECOVERY_MESSAGE,
                error=RECOVERY_ERROR,
            )
