"""No-op cache adapter.

Used when no cache backend is configured: every read is a miss and every
write succeeds without storing anything. Lets callers depend on
CacheProtocol unconditionally instead of checking for a missing cache.
"""

from typing import Any

from src.core.result import Result, Success
from src.infrastructure.errors import CacheError


class NullCache:
    """Always-miss implementation of CacheProtocol."""

    async def get(self, key: str) -> Result[str | None, CacheError]:
        return Success(value=None)

    async def get_json(self, key: str) -> Result[dict[str, Any] | None, CacheError]:
        return Success(value=None)

    async def set(
        self, key: str, value: str, ttl: int | None = None
    ) -> Result[None, CacheError]:
        return Success(value=None)

    async def set_json(
        self, key: str, value: dict[str, Any], ttl: int | None = None
    ) -> Result[None, CacheError]:
        return Success(value=None)

    async def delete(self, *keys: str) -> Result[int, CacheError]:
        return Success(value=0)

    async def ping(self) -> Result[bool, CacheError]:
        return Success(value=True)

    async def close(self) -> None:
        return None
