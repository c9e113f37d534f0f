"""Authentication DTOs (Data Transfer Objects).

Result dataclasses carried from the auth handlers back to the
presentation layer.
"""

from dataclasses import dataclass

from src.domain.entities.user import User


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Access/refresh token pair.

    Attributes:
        access_token: Short-lived JWT authorizing API calls.
        refresh_token: Long-lived JWT exchanged for a new pair.
        token_type: Token type (always "bearer").
        expires_in: Access token lifetime in seconds.
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = 1800


@dataclass(frozen=True, kw_only=True)
class AuthResult:
    """Outcome of a successful register, login or refresh.

    Attributes:
        user: Authenticated user.
        tokens: Freshly issued token pair.
    """

    user: User
    tokens: AuthTokens
