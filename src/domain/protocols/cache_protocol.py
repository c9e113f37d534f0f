"""Cache protocol (port) for key/value caching.

Infrastructure adapters (RedisAdapter, NullCache) implement this protocol
without inheritance. All operations return Result types; callers treat a
Failure as a cache miss (fail-open).
"""

from typing import Any, Protocol

from src.core.errors import DomainError
from src.core.result import Result


class CacheProtocol(Protocol):
    """Key/value cache interface.

    Implementations:
        - RedisAdapter: redis.asyncio backend
        - NullCache: always-miss adapter used when no cache is configured
    """

    async def get(self, key: str) -> Result[str | None, DomainError]:
        """Get a string value; Success(None) on miss."""
        ...

    async def get_json(self, key: str) -> Result[dict[str, Any] | None, DomainError]:
        """Get and decode a JSON object; Success(None) on miss."""
        ...

    async def set(
        self, key: str, value: str, ttl: int | None = None
    ) -> Result[None, DomainError]:
        """Store a string value with optional TTL in seconds."""
        ...

    async def set_json(
        self, key: str, value: dict[str, Any], ttl: int | None = None
    ) -> Result[None, DomainError]:
        """Encode and store a JSON object with optional TTL in seconds."""
        ...

    async def delete(self, *keys: str) -> Result[int, DomainError]:
        """Delete keys; Success(number of keys removed)."""
        ...

    async def ping(self) -> Result[bool, DomainError]:
        """Connectivity probe (startup)."""
        ...

    async def close(self) -> None:
        """Release connections (shutdown)."""
        ...
