"""Repository implementations.

Usage:
    from src.infrastructure.persistence.repositories import InMemoryUserRepository
"""

from src.infrastructure.persistence.repositories.in_memory_user_repository import (
    InMemoryUserRepository,
)

__all__ = ["InMemoryUserRepository"]
