"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Failure contract:
        - Lookups return None when the user does not exist
        - Infrastructure failures raise RepositoryError
        - Writes that would duplicate an email or username raise
          DuplicateRecordError
    """

    async def create(self, user: User) -> None:
        """Persist a new user.

        Raises:
            DuplicateRecordError: Email or username already taken.
            RepositoryError: Store failure.
        """
        ...

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID."""
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive)."""
        ...

    async def get_by_username(self, username: str) -> User | None:
        """Find user by username."""
        ...

    async def update(self, user: User) -> None:
        """Replace an existing user record.

        Raises:
            DuplicateRecordError: New email or username collides with another user.
            RepositoryError: Store failure or user missing.
        """
        ...

    async def delete(self, user_id: UUID) -> bool:
        """Delete a user.

        Returns:
            True if a user was deleted, False if none existed.
        """
        ...

    async def list_users(self, offset: int, limit: int) -> tuple[list[User], int]:
        """Return one page of users and the total user count.

        Args:
            offset: Number of users to skip.
            limit: Maximum users to return.

        Returns:
            (users, total) in creation order.
        """
        ...

    async def exists_by_email_or_username(self, email: str, username: str) -> bool:
        """Check whether any user already holds the email or the username."""
        ...
