"""Rate limit rule value object.

Parameters of the per-client token bucket.

Usage:
    from src.domain.value_objects import RateLimitRule

    rule = RateLimitRule(rate=10.0, burst=20)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitRule:
    """Token bucket configuration (value object).

    Token Bucket Algorithm:
        - Bucket starts full (burst tokens)
        - Each request consumes one token
        - Tokens refill continuously at ``rate`` per second, capped at burst
        - A request finding less than one token is rejected

    Attributes:
        rate: Tokens added per second (sustained requests per second).
        burst: Bucket capacity (maximum requests in a zero-elapsed window).
        idle_seconds: Buckets unused for longer than this are evicted.
    """

    rate: float
    burst: int
    idle_seconds: float = 300.0

    def __post_init__(self) -> None:
        if self.rate <= 0:
            raise ValueError("rate must be positive")
        if self.burst < 1:
            raise ValueError("burst must be at least 1")
        if self.idle_seconds <= 0:
            raise ValueError("idle_seconds must be positive")

    @property
    def retry_after_seconds(self) -> float:
        """Time for one token to refill from empty."""
        return 1.0 / self.rate
