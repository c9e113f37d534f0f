"""In-memory per-client rate limiter.

Keeps one TokenBucket per client identity plus a last-seen time. A periodic
sweep evicts clients idle longer than the configured threshold so memory
stays bounded by the number of recently active clients.

Concurrency:
    ``allow`` and ``sweep`` take the same threading lock, so bucket creation,
    last-seen updates and consumption for one call are atomic with respect to
    each other and to eviction. The critical section is O(1) for ``allow``.

Usage:
    limiter = InMemoryRateLimiter(RateLimitRule(rate=10.0, burst=20))
    if not limiter.allow("203.0.113.7"):
        ...  # reject with 429

    # in the application lifespan
    task = asyncio.create_task(limiter.run_sweeper(interval_seconds=300))
"""

from __future__ import annotations

import asyncio
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.domain.value_objects import RateLimitRule
from src.infrastructure.rate_limit.token_bucket import TokenBucket

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


@dataclass(slots=True)
class _ClientEntry:
    bucket: TokenBucket
    last_seen: float


class InMemoryRateLimiter:
    """Token bucket per client, process-local.

    Implements RateLimitProtocol (structural typing).

    Args:
        rule: Bucket parameters and idle threshold.
        clock: Monotonic clock in seconds (injectable for tests).
        logger: Optional structured logger for sweep results.
    """

    def __init__(
        self,
        rule: RateLimitRule,
        *,
        clock: Callable[[], float] = time.monotonic,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._rule = rule
        self._clock = clock
        self._logger = logger
        self._clients: dict[str, _ClientEntry] = {}
        self._lock = threading.Lock()

    @property
    def rule(self) -> RateLimitRule:
        """Configured bucket parameters."""
        return self._rule

    @property
    def retry_after_seconds(self) -> float:
        """Seconds for one token to refill."""
        return self._rule.retry_after_seconds

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)

    def __contains__(self, client_id: object) -> bool:
        with self._lock:
            return client_id in self._clients

    def allow(self, client_id: str) -> bool:
        """Admit or reject one request from ``client_id``.

        Creates the client's bucket on first sight and refreshes its
        last-seen time on every call, admitted or not.
        """
        now = self._clock()
        with self._lock:
            entry = self._clients.get(client_id)
            if entry is None:
                entry = _ClientEntry(
                    bucket=TokenBucket(self._rule.rate, self._rule.burst, now),
                    last_seen=now,
                )
                self._clients[client_id] = entry
            entry.last_seen = now
            return entry.bucket.allow(now)

    def sweep(self) -> int:
        """Evict clients idle for longer than the idle threshold.

        Returns:
            Number of evicted clients.
        """
        now = self._clock()
        threshold = self._rule.idle_seconds
        with self._lock:
            stale = [
                client_id
                for client_id, entry in self._clients.items()
                if now - entry.last_seen > threshold
            ]
            for client_id in stale:
                del self._clients[client_id]

        if stale and self._logger is not None:
            self._logger.debug(
                "Rate limiter swept idle clients",
                evicted=len(stale),
                remaining=len(self),
            )
        return len(stale)

    async def run_sweeper(self, interval_seconds: float) -> None:
        """Sweep every ``interval_seconds`` until cancelled.

        A failing sweep is logged and the loop keeps running.
        """
        while True:
            await asyncio.sleep(interval_seconds)
            try:
                self.sweep()
            except Exception as e:
                if self._logger is not None:
                    self._logger.error("Rate limiter sweep failed", error=e)
