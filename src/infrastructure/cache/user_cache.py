"""User record cache.

Typed wrapper around CacheProtocol for user records. Implements
UserCacheProtocol.

Behavior:
    - Records are stored as JSON under ``user:{id}`` with a TTL
    - The password hash is never written to the cache; users rebuilt from
      the cache carry an empty hash and are only used for reads
    - Cache failures are logged and treated as misses (fail-open)
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any
from uuid import UUID

from src.core.result import Failure, Success
from src.domain.entities.user import User
from src.infrastructure.cache.cache_keys import CacheKeys

if TYPE_CHECKING:
    from src.domain.protocols.cache_protocol import CacheProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol


def _serialize(user: User) -> dict[str, Any]:
    return {
        "id": str(user.id),
        "email": user.email,
        "username": user.username,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "avatar": user.avatar,
        "is_active": user.is_active,
        "created_at": user.created_at.isoformat() if user.created_at else None,
        "updated_at": user.updated_at.isoformat() if user.updated_at else None,
    }


def _deserialize(data: dict[str, Any]) -> User:
    return User(
        id=UUID(data["id"]),
        email=data["email"],
        username=data["username"],
        password_hash="",
        first_name=data.get("first_name"),
        last_name=data.get("last_name"),
        avatar=data.get("avatar"),
        is_active=bool(data.get("is_active", True)),
        created_at=datetime.fromisoformat(data["created_at"]) if data.get("created_at") else None,
        updated_at=datetime.fromisoformat(data["updated_at"]) if data.get("updated_at") else None,
    )


class UserCache:
    """Cache of user records keyed by id.

    Args:
        cache: Underlying key/value cache.
        ttl_seconds: Entry lifetime.
        logger: Structured logger for cache failures.
        keys: Key builder.
    """

    def __init__(
        self,
        cache: CacheProtocol,
        ttl_seconds: int,
        logger: LoggerProtocol,
        keys: CacheKeys | None = None,
    ) -> None:
        self._cache = cache
        self._ttl_seconds = ttl_seconds
        self._logger = logger
        self._keys = keys or CacheKeys()

    async def get(self, user_id: UUID) -> User | None:
        """Return the cached user, or None on miss or failure."""
        key = self._keys.user(user_id)
        match await self._cache.get_json(key):
            case Success(value=None):
                return None
            case Success(value=data):
                try:
                    return _deserialize(data)
                except (KeyError, TypeError, ValueError) as e:
                    self._logger.warning(
                        "Discarding unreadable cached user",
                        cache_key=key,
                        error_type=type(e).__name__,
                    )
                    await self._cache.delete(key)
                    return None
            case Failure(error=error):
                self._logger.warning(
                    "User cache read failed", cache_key=key, error=str(error)
                )
                return None

    async def set(self, user: User) -> None:
        """Cache the user (best effort)."""
        key = self._keys.user(user.id)
        result = await self._cache.set_json(key, _serialize(user), ttl=self._ttl_seconds)
        if isinstance(result, Failure):
            self._logger.warning(
                "User cache write failed", cache_key=key, error=str(result.error)
            )

    async def delete(self, user_id: UUID) -> None:
        """Evict the user (best effort)."""
        key = self._keys.user(user_id)
        result = await self._cache.delete(key)
        if isinstance(result, Failure):
            self._logger.warning(
                "User cache eviction failed", cache_key=key, error=str(result.error)
            )
