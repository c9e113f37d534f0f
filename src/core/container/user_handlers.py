"""User management handler dependency factories."""

from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.container.infrastructure import (
    get_logger,
    get_user_cache,
    get_user_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.delete_user_handler import DeleteUserHandler
    from src.application.commands.handlers.update_user_handler import UpdateUserHandler
    from src.application.queries.handlers.get_user_handler import GetUserHandler
    from src.application.queries.handlers.list_users_handler import ListUsersHandler


def get_get_user_handler() -> "GetUserHandler":
    """Get GetUser query handler (request-scoped, cache-first)."""
    from src.application.queries.handlers.get_user_handler import GetUserHandler

    return GetUserHandler(
        user_repo=get_user_repository(),
        user_cache=get_user_cache(),
        logger=get_logger(),
        store_timeout=get_settings().store_timeout_seconds,
    )


def get_list_users_handler() -> "ListUsersHandler":
    """Get ListUsers query handler (request-scoped)."""
    from src.application.queries.handlers.list_users_handler import ListUsersHandler

    return ListUsersHandler(
        user_repo=get_user_repository(),
        logger=get_logger(),
        store_timeout=get_settings().store_timeout_seconds,
    )


def get_update_user_handler() -> "UpdateUserHandler":
    """Get UpdateUser command handler (request-scoped)."""
    from src.application.commands.handlers.update_user_handler import UpdateUserHandler

    return UpdateUserHandler(
        user_repo=get_user_repository(),
        user_cache=get_user_cache(),
        logger=get_logger(),
        store_timeout=get_settings().store_timeout_seconds,
    )


def get_delete_user_handler() -> "DeleteUserHandler":
    """Get DeleteUser command handler (request-scoped)."""
    from src.application.commands.handlers.delete_user_handler import DeleteUserHandler

    return DeleteUserHandler(
        user_repo=get_user_repository(),
        user_cache=get_user_cache(),
        logger=get_logger(),
        store_timeout=get_settings().store_timeout_seconds,
    )
