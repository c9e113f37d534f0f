"""Authentication handler dependency factories.

Request-scoped handler instances for register, login and token refresh.
Handlers are cheap; their collaborators are app-scoped singletons.
"""

from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.container.infrastructure import (
    get_auth_token_issuer,
    get_logger,
    get_login_timing_hash,
    get_password_service,
    get_token_service,
    get_user_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )


def get_register_user_handler() -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped).

    Usage:
        @router.post("/auth/register")
        async def register(
            handler: RegisterUserHandler = Depends(get_register_user_handler),
        ):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )

    return RegisterUserHandler(
        user_repo=get_user_repository(),
        password_service=get_password_service(),
        token_issuer=get_auth_token_issuer(),
        logger=get_logger(),
        store_timeout=get_settings().store_timeout_seconds,
    )


def get_login_user_handler() -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped)."""
    from src.application.commands.handlers.login_user_handler import LoginUserHandler

    return LoginUserHandler(
        user_repo=get_user_repository(),
        password_service=get_password_service(),
        token_issuer=get_auth_token_issuer(),
        logger=get_logger(),
        store_timeout=get_settings().store_timeout_seconds,
        timing_hash=get_login_timing_hash(),
    )


def get_refresh_token_handler() -> "RefreshAccessTokenHandler":
    """Get RefreshAccessToken command handler (request-scoped)."""
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )

    settings = get_settings()
    return RefreshAccessTokenHandler(
        user_repo=get_user_repository(),
        token_service=get_token_service(),
        token_issuer=get_auth_token_issuer(),
        logger=get_logger(),
        store_timeout=settings.store_timeout_seconds,
        enforce_token_types=settings.enforce_token_types,
    )
