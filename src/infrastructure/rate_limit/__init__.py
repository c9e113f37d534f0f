"""Rate limit infrastructure.

Usage:
    from src.infrastructure.rate_limit import InMemoryRateLimiter, TokenBucket
"""

from src.infrastructure.rate_limit.in_memory_rate_limiter import InMemoryRateLimiter
from src.infrastructure.rate_limit.token_bucket import TokenBucket

__all__ = ["InMemoryRateLimiter", "TokenBucket"]
