"""Redis adapter implementing CacheProtocol.

Wraps an async Redis client and maps Redis exceptions to CacheError.

Architecture:
- Implements CacheProtocol without inheritance (structural typing)
- Maps Redis exceptions to CacheError with ErrorCode.CACHE_FAILED
- Returns Result types for all operations
- Callers treat any Failure as a miss (fail-open)
"""

import json
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError


class RedisAdapter:
    """Redis implementation of CacheProtocol.

    Note: Does NOT inherit from CacheProtocol (uses structural typing).

    Attributes:
        _redis: Async Redis client instance.
    """

    def __init__(self, redis_client: Redis) -> None:
        """Initialize Redis adapter.

        Args:
            redis_client: Async Redis client instance.
        """
        self._redis = redis_client

    @classmethod
    def from_url(cls, url: str, *, timeout_seconds: float = 5.0) -> "RedisAdapter":
        """Build an adapter with a pooled client for ``url``."""
        from redis.asyncio import ConnectionPool

        pool = ConnectionPool.from_url(
            url,
            max_connections=50,
            decode_responses=False,
            socket_connect_timeout=timeout_seconds,
            socket_timeout=timeout_seconds,
            retry_on_timeout=True,
        )
        return cls(redis_client=Redis(connection_pool=pool))

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get value from Redis.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_GET_ERROR,
                    message=f"Failed to get key '{key}' from cache",
                    details={"key": key, "error": str(e)},
                )
            )

        if value is None:
            return Success(value=None)
        decoded = value.decode("utf-8") if isinstance(value, bytes) else value
        return Success(value=decoded)

    async def get_json(self, key: str) -> Result[dict[str, Any] | None, CacheError]:
        """Get JSON value from Redis.

        Returns:
            Result with parsed dict if found, None if not found, or CacheError.
        """
        result = await self.get(key)

        match result:
            case Success(value=None):
                return Success(value=None)
            case Success(value=raw):
                try:
                    parsed = json.loads(raw)
                except json.JSONDecodeError as e:
                    return Failure(
                        error=CacheError(
                            code=ErrorCode.CACHE_FAILED,
                            infrastructure_code=InfrastructureErrorCode.CACHE_SERIALIZATION_ERROR,
                            message=f"Failed to parse JSON for key '{key}'",
                            details={"key": key, "error": str(e)},
                        )
                    )
                if not isinstance(parsed, dict):
                    return Failure(
                        error=CacheError(
                            code=ErrorCode.CACHE_FAILED,
                            infrastructure_code=InfrastructureErrorCode.CACHE_SERIALIZATION_ERROR,
                            message=f"Cached value for key '{key}' is not an object",
                            details={"key": key},
                        )
                    )
                return Success(value=parsed)
            case Failure(error=err):
                return Failure(error=err)

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Set value in Redis.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Time to live in seconds (None = no expiration).
        """
        try:
            if ttl is not None:
                await self._redis.setex(key, ttl, value)
            else:
                await self._redis.set(key, value)
        except RedisError as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_SET_ERROR,
                    message=f"Failed to set key '{key}' in cache",
                    details={"key": key, "ttl": ttl, "error": str(e)},
                )
            )
        return Success(value=None)

    async def set_json(
        self,
        key: str,
        value: dict[str, Any],
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Set JSON value in Redis."""
        try:
            serialized = json.dumps(value)
        except (TypeError, ValueError) as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_SERIALIZATION_ERROR,
                    message=f"Failed to serialize value for key '{key}'",
                    details={"key": key, "error": str(e)},
                )
            )
        return await self.set(key, serialized, ttl)

    async def delete(self, *keys: str) -> Result[int, CacheError]:
        """Delete keys from Redis.

        Returns:
            Result with the number of keys removed, or CacheError.
        """
        if not keys:
            return Success(value=0)
        try:
            deleted_count = await self._redis.delete(*keys)
        except RedisError as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_DELETE_ERROR,
                    message="Failed to delete keys from cache",
                    details={"keys": list(keys), "error": str(e)},
                )
            )
        return Success(value=int(deleted_count))

    async def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity (startup probe)."""
        try:
            await self._redis.ping()  # type: ignore[misc]
        except RedisError as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                    message="Redis health check failed",
                    details={"error": str(e)},
                )
            )
        return Success(value=True)

    async def close(self) -> None:
        """Release pooled connections."""
        await self._redis.aclose()
