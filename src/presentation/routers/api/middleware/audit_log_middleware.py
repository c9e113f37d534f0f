"""Audit log middleware.

Writes an AuditRecord for requests worth auditing:
    - every mutating method (POST, PUT, PATCH, DELETE)
    - every error response (status >= 400)
    - the authentication endpoints, whatever the method

Health, documentation and metrics paths are never audited. Records with a
5xx status are logged at error level, 4xx at warning, the rest at info.

The authenticated identity comes from ``request.state`` (set by the bearer
gate) and is only present on protected routes.
"""

import time
from typing import TYPE_CHECKING, Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from src.domain.value_objects import AuditRecord
from src.presentation.routers.api.middleware.client_ip import get_client_ip

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol

MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})

SUPPRESSED_PATHS = frozenset({"/health", "/metrics", "/docs", "/redoc", "/openapi.json"})
SUPPRESSED_PREFIXES = ("/docs/", "/redoc/")


def auth_paths(api_prefix: str = "/api/v1") -> frozenset[str]:
    """Authentication endpoint paths under ``api_prefix``."""
    return frozenset(
        f"{api_prefix}/auth/{name}" for name in ("login", "register", "refresh", "logout")
    )


def should_audit(
    method: str,
    path: str,
    status: int,
    audited_paths: frozenset[str] | None = None,
) -> bool:
    """Decide whether a finished request gets an audit record.

    Suppressed paths win over every other rule.
    """
    if path in SUPPRESSED_PATHS or path.startswith(SUPPRESSED_PREFIXES):
        return False
    if method.upper() in MUTATING_METHODS:
        return True
    if status >= 400:
        return True
    return path in (audited_paths if audited_paths is not None else auth_paths())


class AuditLogMiddleware(BaseHTTPMiddleware):
    """Starlette middleware emitting audit records to the logger.

    Args:
        app: The ASGI application to wrap.
        logger: Audit sink; defaults to the container logger.
        api_prefix: Prefix of the versioned API (locates auth endpoints).
        trust_forwarded_for: Honor X-Forwarded-For for the client address.
    """

    def __init__(
        self,
        app: ASGIApp,
        logger: "LoggerProtocol | None" = None,
        api_prefix: str = "/api/v1",
        trust_forwarded_for: bool = False,
    ) -> None:
        super().__init__(app)
        self._logger = logger
        self._auth_paths = auth_paths(api_prefix)
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

        path = request.url.path
        if not should_audit(request.method, path, response.status_code, self._auth_paths):
            return response

        user_id = getattr(request.state, "user_id", None)
        record = AuditRecord(
            request_id=getattr(request.state, "request_id", None),
            method=request.method,
            path=path,
            status=response.status_code,
            latency_ms=round((time.perf_counter() - start) * 1000, 2),
            client_ip=get_client_ip(request, self._trust_forwarded_for),
            user_agent=request.headers.get("User-Agent", ""),
            user_id=str(user_id) if user_id is not None else None,
            email=getattr(request.state, "user_email", None),
        )
        self._emit(record)
        return response

    def _emit(self, record: AuditRecord) -> None:
        logger = self._get_logger()
        log = {"error": logger.error, "warning": logger.warning}.get(record.level, logger.info)
        log("Audit", **record.to_log_context())
