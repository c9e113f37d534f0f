"""Cache infrastructure.

- RedisAdapter: redis.asyncio implementation of CacheProtocol
- NullCache: always-miss implementation used when Redis is not configured
- UserCache: typed user-record cache on top of either
"""

from src.infrastructure.cache.cache_keys import CacheKeys
from src.infrastructure.cache.null_cache import NullCache
from src.infrastructure.cache.redis_adapter import RedisAdapter
from src.infrastructure.cache.user_cache import UserCache

__all__ = ["CacheKeys", "NullCache", "RedisAdapter", "UserCache"]
