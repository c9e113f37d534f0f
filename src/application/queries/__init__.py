"""Queries - Read operations.

Each query has a corresponding handler in ``handlers/``.
"""

from src.application.queries.user_queries import GetUser, ListUsers

__all__ = ["GetUser", "ListUsers"]
