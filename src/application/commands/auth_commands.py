"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
- Field values arrive already validated by the request schemas
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new user account.

    Attributes:
        email: Normalized email address.
        username: Unique username.
        password: Plaintext password (strength already validated, will be hashed).
        first_name: Optional given name.
        last_name: Optional family name.

    Example:
        >>> command = RegisterUser(
        ...     email="user@example.com",
        ...     username="user",
        ...     password="SecurePass123!",
        ... )
        >>> result = await handler.handle(command)
    """

    email: str
    username: str
    password: str
    first_name: str | None = None
    last_name: str | None = None


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate with email and password and obtain a token pair.

    Attributes:
        email: Normalized email address.
        password: Plaintext password.
    """

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Exchange a refresh token for a new token pair.

    Attributes:
        refresh_token: Token previously issued by register, login or refresh.
    """

    refresh_token: str
