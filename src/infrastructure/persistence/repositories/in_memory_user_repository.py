"""InMemoryUserRepository - process-local implementation of UserRepository.

Adapter for hexagonal architecture. Default user store for local runs and
tests; a database-backed adapter can replace it through the container
without touching handlers.

Records are copied on the way in and out, so callers only change stored
state through ``create``/``update``/``delete``.
"""

import asyncio
from dataclasses import replace
from uuid import UUID

from src.domain.entities.user import User
from src.domain.errors import DuplicateRecordError, RepositoryError


class InMemoryUserRepository:
    """Dictionary-backed implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses
    structural typing).

    Email uniqueness is case-insensitive; username uniqueness is exact.
    Listing returns users in creation order.

    Example:
        >>> repo = InMemoryUserRepository()
        >>> await repo.create(user)
        >>> await repo.get_by_email("USER@example.com")
        User(...)
    """

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}
        self._lock = asyncio.Lock()

    def _conflicts(self, user: User) -> bool:
        email = user.email.lower()
        return any(
            other.id != user.id
            and (other.email.lower() == email or other.username == user.username)
            for other in self._users.values()
        )

    async def create(self, user: User) -> None:
        """Persist a new user.

        Raises:
            DuplicateRecordError: Id, email or username already taken.
        """
        async with self._lock:
            if user.id in self._users or self._conflicts(user):
                raise DuplicateRecordError("User with this email or username already exists")
            self._users[user.id] = replace(user)

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID."""
        async with self._lock:
            user = self._users.get(user_id)
            return replace(user) if user is not None else None

    async def get_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive)."""
        needle = email.lower()
        async with self._lock:
            for user in self._users.values():
                if user.email.lower() == needle:
                    return replace(user)
        return None

    async def get_by_username(self, username: str) -> User | None:
        """Find user by username."""
        async with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return replace(user)
        return None

    async def update(self, user: User) -> None:
        """Replace an existing user.

        Raises:
            DuplicateRecordError: New email or username collides.
            RepositoryError: User does not exist.
        """
        async with self._lock:
            if user.id not in self._users:
                raise RepositoryError(f"User {user.id} does not exist")
            if self._conflicts(user):
                raise DuplicateRecordError("User with this email or username already exists")
            self._users[user.id] = replace(user)

    async def delete(self, user_id: UUID) -> bool:
        """Delete a user; False if it did not exist."""
        async with self._lock:
            return self._users.pop(user_id, None) is not None

    async def list_users(self, offset: int, limit: int) -> tuple[list[User], int]:
        """Return one page of users (creation order) and the total count."""
        async with self._lock:
            users = list(self._users.values())
        page = users[offset : offset + limit]
        return [replace(user) for user in page], len(users)

    async def exists_by_email_or_username(self, email: str, username: str) -> bool:
        """Check whether any user holds the email or the username."""
        needle = email.lower()
        async with self._lock:
            return any(
                user.email.lower() == needle or user.username == username
                for user in self._users.values()
            )
