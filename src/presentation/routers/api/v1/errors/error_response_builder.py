"""Error response builder.

Maps domain error codes to one HTTP status and one caller-facing message.
Internal failures (store, hashing, signing) always surface as a generic
500; their detail stays in the server log.

Exports:
    ErrorResponseBuilder: Utility class for building error envelopes
"""

from fastapi import status
from fastapi.responses import JSONResponse

from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.schemas.common_schemas import error_response

INTERNAL_ERROR_MESSAGE = "Internal server error"

# ErrorCode -> (HTTP status, caller-facing message or None to use error.message)
_ERROR_MAPPING: dict[ErrorCode, tuple[int, str | None]] = {
    ErrorCode.VALIDATION_FAILED: (status.HTTP_400_BAD_REQUEST, None),
    ErrorCode.USER_ALREADY_EXISTS: (status.HTTP_409_CONFLICT, "User already exists"),
    ErrorCode.INVALID_CREDENTIALS: (status.HTTP_401_UNAUTHORIZED, "Invalid email or password"),
    ErrorCode.TOKEN_INVALID: (status.HTTP_401_UNAUTHORIZED, "Invalid or expired token"),
    ErrorCode.UNAUTHORIZED: (status.HTTP_401_UNAUTHORIZED, "Unauthorized"),
    ErrorCode.ACCOUNT_INACTIVE: (status.HTTP_401_UNAUTHORIZED, "User account is inactive"),
    ErrorCode.USER_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "User not found"),
    ErrorCode.RATE_LIMIT_EXCEEDED: (
        status.HTTP_429_TOO_MANY_REQUESTS,
        "Rate limit exceeded. Please try again later.",
    ),
    ErrorCode.PERSISTENCE_FAILED: (status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE),
    ErrorCode.HASHING_FAILED: (status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE),
    ErrorCode.MALFORMED_HASH: (status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE),
    ErrorCode.SIGNING_FAILED: (status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE),
    ErrorCode.CACHE_FAILED: (status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE),
}


class ErrorResponseBuilder:
    """Build error envelopes from domain errors.

    Example:
        >>> error = NotFoundError(
        ...     code=ErrorCode.USER_NOT_FOUND,
        ...     message="User not found",
        ...     resource_type="User",
        ...     resource_id=str(user_id),
        ... )
        >>> response = ErrorResponseBuilder.from_domain_error(error)
        >>> response.status_code
        404
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        message: str | None = None,
        status_code: int | None = None,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """Convert a DomainError to an error envelope.

        Args:
            error: Domain error returned by a handler.
            message: Endpoint-specific message replacing the default for
                non-internal errors (e.g. "Authentication failed").
            status_code: Endpoint-specific status replacing the mapped one
                for non-internal errors.
            headers: Extra response headers (e.g. Retry-After).

        Returns:
            JSONResponse with status from the code mapping. The ``error``
            field carries the error code slug.
        """
        if ErrorResponseBuilder.is_internal(error.code):
            return error_response(
                status_code=ErrorResponseBuilder.get_status_code(error.code),
                message=INTERNAL_ERROR_MESSAGE,
                error="internal_error",
                headers=headers,
            )

        detail: str | list[dict[str, str]] = error.code.value
        if isinstance(error, ValidationError) and error.field:
            detail = [{"field": error.field, "message": error.message}]

        return error_response(
            status_code=status_code or ErrorResponseBuilder.get_status_code(error.code),
            message=message or ErrorResponseBuilder.get_message(error),
            error=detail,
            headers=headers,
        )

    @staticmethod
    def get_status_code(code: ErrorCode) -> int:
        """Map error code to HTTP status code (unknown codes are 500)."""
        return _ERROR_MAPPING.get(code, (status.HTTP_500_INTERNAL_SERVER_ERROR, None))[0]

    @staticmethod
    def get_message(error: DomainError) -> str:
        """Caller-facing message for the error."""
        default = _ERROR_MAPPING.get(error.code, (0, INTERNAL_ERROR_MESSAGE))[1]
        return default or error.message

    @staticmethod
    def is_internal(code: ErrorCode) -> bool:
        """True for errors whose detail must not reach the caller."""
        return ErrorResponseBuilder.get_status_code(code) >= 500
