"""Rate limit protocol.

Admission check keyed by client identity (typically the client IP).
"""

from typing import Protocol


class RateLimitProtocol(Protocol):
    """Per-client admission control.

    Implementations:
        - InMemoryRateLimiter: token bucket per client, process-local
    """

    def allow(self, client_id: str) -> bool:
        """Consume one unit for the client.

        Returns:
            True if the request is admitted, False if the client is over limit.
        """
        ...

    @property
    def retry_after_seconds(self) -> float:
        """Seconds a rejected client should wait before retrying."""
        ...
