"""User cache protocol.

Typed cache of user records keyed by user id. Implementations never fail:
cache errors degrade to a miss so reads fall through to the store.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserCacheProtocol(Protocol):
    """Cache of user records keyed by id."""

    async def get(self, user_id: UUID) -> User | None:
        """Return the cached user, or None on miss or cache failure."""
        ...

    async def set(self, user: User) -> None:
        """Cache the user (best effort)."""
        ...

    async def delete(self, user_id: UUID) -> None:
        """Evict the user (best effort)."""
        ...
