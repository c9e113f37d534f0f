"""Global exception handlers for FastAPI application.

Converts framework exceptions into the standard response envelope.

Handlers:
    http_exception_handler: Converts HTTPException (auth gate, 404 routes)
    validation_exception_handler: Converts RequestValidationError to 400

Unexpected exceptions are not handled here; RecoveryMiddleware converts
them to the uniform 500 response.

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.schemas.common_schemas import error_response

INVALID_REQUEST_MESSAGE = "Invalid request data"

# HTTP status code -> error slug
_HTTP_STATUS_SLUGS: dict[int, str] = {
    400: "bad_request",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    415: "unsupported_media_type",
    500: "internal_error",
    503: "service_unavailable",
}


def _get_error_slug(status_code: int) -> str:
    return _HTTP_STATUS_SLUGS.get(status_code, "error")


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to an error envelope.

    Preserves the exception headers (e.g. ``WWW-Authenticate``). A 401 from
    the bearer gate is built from ErrorCode.UNAUTHORIZED.

    Example:
        >>> raise HTTPException(status_code=401, detail="Invalid or expired token")
        >>> # {"success": false, "message": "Invalid or expired token",
        >>> #  "error": "unauthorized"}
    """
    # Type narrowing: registered only for HTTPException
    assert isinstance(exc, StarletteHTTPException)

    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    headers = getattr(exc, "headers", None)
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        return ErrorResponseBuilder.from_domain_error(
            AuthenticationError(code=ErrorCode.UNAUTHORIZED, message=message),
            message=message,
            headers=headers,
        )

    return error_response(
        status_code=exc.status_code,
        message=message,
        error=_get_error_slug(exc.status_code),
        headers=headers,
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to a 400 envelope with field errors.

    Example:
        >>> # POST /api/v1/auth/register with a weak password
        >>> # {
        >>> #   "success": false,
        >>> #   "message": "Invalid request data",
        >>> #   "error": [{"field": "password", "message": "..."}]
        >>> # }
    """
    # Type narrowing: registered only for RequestValidationError
    assert isinstance(exc, RequestValidationError)

    field_errors: list[dict[str, str]] = []
    for error in exc.errors():
        # ["body", "email"] -> "email"
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p not in ("body", "query", "path")]
        field_errors.append(
            {
                "field": ".".join(field_parts) if field_parts else "unknown",
                "message": error.get("msg", "Validation failed"),
            }
        )

    return error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        message=INVALID_REQUEST_MESSAGE,
        error=field_errors,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application."""
    # Auth gate, unknown routes, wrong methods
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)

    # Pydantic validation errors -> 400 with field list
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
