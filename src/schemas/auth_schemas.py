"""Authentication request/response schemas.

Endpoints:
    POST /api/v1/auth/register  - Create account, returns token pair
    POST /api/v1/auth/login     - Exchange credentials for token pair
    POST /api/v1/auth/refresh   - Exchange refresh token for new pair
"""

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos.auth_dtos import AuthResult
from src.domain.types import Email, LoginPassword, Password, PersonName, Username
from src.schemas.user_schemas import UserResponse


class RegisterRequest(BaseModel):
    """Request schema for registration.

    POST /api/v1/auth/register
    Returns: 201 Created
    """

    email: Email
    username: Username
    password: Password
    first_name: PersonName | None = None
    last_name: PersonName | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "username": "jane_doe",
                "password": "SecurePass123!",
                "first_name": "Jane",
                "last_name": "Doe",
            }
        }
    )


class LoginRequest(BaseModel):
    """Request schema for login.

    POST /api/v1/auth/login
    Returns: 200 OK
    """

    email: Email
    password: LoginPassword

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "user@example.com", "password": "SecurePass123!"}
        }
    )


class RefreshRequest(BaseModel):
    """Request schema for token refresh.

    POST /api/v1/auth/refresh
    """

    refresh_token: str = Field(..., min_length=1, description="Refresh token")


class AuthResponse(BaseModel):
    """User plus a fresh token pair."""

    user: UserResponse
    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="JWT refresh token")
    token_type: str = Field(default="bearer", description="Authorization scheme")
    expires_in: int = Field(..., description="Access token lifetime in seconds")

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        return cls(
            user=UserResponse.from_entity(result.user),
            access_token=result.tokens.access_token,
            refresh_token=result.tokens.refresh_token,
            token_type=result.tokens.token_type,
            expires_in=result.tokens.expires_in,
        )
