"""Query handlers."""

from src.application.queries.handlers.get_user_handler import GetUserHandler
from src.application.queries.handlers.list_users_handler import ListUsersHandler

__all__ = ["GetUserHandler", "ListUsersHandler"]
