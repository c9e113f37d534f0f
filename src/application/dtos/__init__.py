"""Application DTOs."""

from src.application.dtos.auth_dtos import AuthResult, AuthTokens
from src.application.dtos.user_dtos import UserPage

__all__ = ["AuthResult", "AuthTokens", "UserPage"]
