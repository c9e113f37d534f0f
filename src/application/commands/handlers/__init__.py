"""Command handlers."""

from src.application.commands.handlers.delete_user_handler import DeleteUserHandler
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from src.application.commands.handlers.register_user_handler import RegisterUserHandler
from src.application.commands.handlers.update_user_handler import UpdateUserHandler

__all__ = [
    "DeleteUserHandler",
    "LoginUserHandler",
    "RefreshAccessTokenHandler",
    "RegisterUserHandler",
    "UpdateUserHandler",
]
