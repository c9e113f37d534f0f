"""Authentication endpoints.

POST /api/v1/auth/register -> 201 | 400 | 409
POST /api/v1/auth/login    -> 200 | 400 | 401
POST /api/v1/auth/refresh  -> 200 | 400 | 401

Each successful call returns the user and a fresh access/refresh pair.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.commands import LoginUser, RefreshAccessToken, RegisterUser
from src.application.commands.handlers import (
    LoginUserHandler,
    RefreshAccessTokenHandler,
    RegisterUserHandler,
)
from src.core.container import (
    get_login_user_handler,
    get_refresh_token_handler,
    get_register_user_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import (
    AuthResponse,
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
)
from src.schemas.common_schemas import success_response

auth_router = APIRouter(prefix="/auth", tags=["Authentication"])


@auth_router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    data: RegisterRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> JSONResponse:
    """Create an account and return its first token pair."""
    command = RegisterUser(
        email=data.email,
        username=data.username,
        password=data.password,
        first_name=data.first_name,
        last_name=data.last_name,
    )

    match await handler.handle(command):
        case Success(value=result):
            return success_response(
                "User registered successfully",
                AuthResponse.from_result(result),
                status_code=status.HTTP_201_CREATED,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@auth_router.post("/login")
async def login(
    data: LoginRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> JSONResponse:
    """Exchange email and password for a token pair.

    Unknown email and wrong password are indistinguishable to the caller.
    """
    command = LoginUser(email=data.email, password=data.password)

    match await handler.handle(command):
        case Success(value=result):
            return success_response("Login successful", AuthResponse.from_result(result))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error,
                message="Authentication failed",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )


@auth_router.post("/refresh")
async def refresh(
    data: RefreshRequest,
    handler: RefreshAccessTokenHandler = Depends(get_refresh_token_handler),
) -> JSONResponse:
    """Exchange a refresh token for a new token pair."""
    command = RefreshAccessToken(refresh_token=data.refresh_token)

    match await handler.handle(command):
        case Success(value=result):
            return success_response(
                "Token refreshed successfully", AuthResponse.from_result(result)
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error,
                message="Token refresh failed",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
