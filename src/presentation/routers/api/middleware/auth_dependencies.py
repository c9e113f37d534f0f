"""JWT authentication dependencies.

FastAPI dependency guarding protected routes. Expects
``Authorization: Bearer <token>`` and answers 401 with one of three fixed
messages:

    - "Authorization header required"        header missing
    - "Invalid authorization header format"  not exactly "Bearer <token>"
    - "Invalid or expired token"             signature, expiry or claims rejected

On success the subject id and email are stored on ``request.state`` for
the audit middleware.

Usage:
    @router.get("/protected")
    async def protected_route(
        current_user: CurrentUser = Depends(get_current_user),
    ):
        return {"user_id": str(current_user.user_id)}
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status

from src.core.config import get_settings
from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.enums import TokenType
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

BEARER_SCHEME = "Bearer"

MISSING_HEADER_MESSAGE = "Authorization header required"
INVALID_FORMAT_MESSAGE = "Invalid authorization header format"
INVALID_TOKEN_MESSAGE = "Invalid or expired token"


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated user information from JWT.

    Attributes:
        user_id: User's unique identifier (from JWT 'sub' claim).
        email: User's email address (from JWT 'email' claim).
        token_jti: JWT unique identifier.
    """

    user_id: UUID
    email: str
    token_jti: str | None = None


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": BEARER_SCHEME},
    )


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from an Authorization header value.

    Raises:
        HTTPException 401: Header missing or not "Bearer <token>".
    """
    if not authorization:
        raise _unauthorized(MISSING_HEADER_MESSAGE)

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != BEARER_SCHEME or not parts[1]:
        raise _unauthorized(INVALID_FORMAT_MESSAGE)

    return parts[1]


async def get_current_user(
    request: Request,
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> CurrentUser:
    """Get current authenticated user from the bearer token.

    Args:
        request: Current request (receives user_id/user_email state).
        token_service: JWT token service (injected).
        authorization: Raw Authorization header.

    Returns:
        CurrentUser with identity from a valid token.

    Raises:
        HTTPException 401: If the header is missing or malformed, or the
            token is invalid or expired.
    """
    token = extract_bearer_token(authorization)

    # Refresh tokens are only refused here when token types are enforced
    expected_type = TokenType.ACCESS if get_settings().enforce_token_types else None

    match token_service.validate_token(token, expected_type):
        case Success(value=claims):
            request.state.user_id = claims.subject_id
            request.state.user_email = claims.email
            return CurrentUser(
                user_id=claims.subject_id,
                email=claims.email,
                token_jti=claims.jti,
            )
        case Failure():
            raise _unauthorized(INVALID_TOKEN_MESSAGE)
