"""Token bucket.

Continuous-refill bucket: holds at most ``burst`` tokens, gains ``rate``
tokens per second, and admits a request when at least one whole token is
available. Time is passed in explicitly so callers (and tests) own the clock.

Not thread-safe on its own; InMemoryRateLimiter serializes access.
"""


class TokenBucket:
    """Single client's token bucket.

    Args:
        rate: Tokens added per second.
        burst: Capacity. The bucket starts full.
        now: Creation time (monotonic seconds).

    Example:
        >>> bucket = TokenBucket(rate=1.0, burst=2, now=0.0)
        >>> bucket.allow(0.0), bucket.allow(0.0), bucket.allow(0.0)
        (True, True, False)
        >>> bucket.allow(1.0)
        True
    """

    __slots__ = ("_rate", "_burst", "_tokens", "_updated_at")

    def __init__(self, rate: float, burst: int, now: float) -> None:
        self._rate = rate
        self._burst = float(burst)
        self._tokens = float(burst)
        self._updated_at = now

    @property
    def tokens(self) -> float:
        """Tokens available as of the last update."""
        return self._tokens

    def _refill(self, now: float) -> None:
        elapsed = now - self._updated_at
        if elapsed > 0:
            self._tokens = min(self._burst, self._tokens + elapsed * self._rate)
            self._updated_at = now

    def allow(self, now: float) -> bool:
        """Consume one token if available.

        Args:
            now: Current monotonic time in seconds. Going backwards is
                treated as no elapsed time.

        Returns:
            True if a token was consumed.
        """
        self._refill(now)
        if self._tokens >= 1.0:
            self._tokens -= 1.0
            return True
        return False
