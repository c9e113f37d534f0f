"""API v1 routers.

Resources:
    /api/v1/auth   - Registration, login, token refresh
    /api/v1/users  - Profile and user management (bearer token required)
"""

from fastapi import APIRouter

from src.presentation.routers.api.v1.auth import auth_router
from src.presentation.routers.api.v1.users import users_router


def build_v1_router(prefix: str = "/api/v1") -> APIRouter:
    """Assemble the versioned API router under ``prefix``."""
    router = APIRouter(prefix=prefix)
    router.include_router(auth_router)
    router.include_router(users_router)
    return router


__all__ = ["build_v1_router"]
