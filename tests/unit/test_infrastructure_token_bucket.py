"""Unit tests for TokenBucket and InMemoryRateLimiter.

Bucket timing uses an explicit fake clock; only the sweeper tests sleep.
"""

import asyncio
import itertools
from unittest.mock import Mock

import pytest

from src.domain.value_objects import RateLimitRule
from src.infrastructure.rate_limit import InMemoryRateLimiter, TokenBucket


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.mark.unit
class TestTokenBucket:
    """Test refill and consumption."""

    def test_starts_full_and_admits_burst(self):
        bucket = TokenBucket(rate=1.0, burst=3, now=0.0)

        results = [bucket.allow(0.0) for _ in range(4)]

        assert results == [True, True, True, False]

    def test_refills_at_rate(self):
        # Arrange
        bucket = TokenBucket(rate=2.0, burst=2, now=0.0)
        bucket.allow(0.0)
        bucket.allow(0.0)

        # Act / Assert
        assert bucket.allow(0.25) is False
        assert bucket.allow(0.5) is True

    def test_refill_capped_at_burst(self):
        # Arrange
        bucket = TokenBucket(rate=100.0, burst=2, now=0.0)

        # Act
        results = [bucket.allow(1000.0) for _ in range(3)]

        # Assert
        assert results == [True, True, False]

    def test_clock_going_backwards_adds_nothing(self):
        # Arrange
        bucket = TokenBucket(rate=1.0, burst=1, now=10.0)
        bucket.allow(10.0)

        # Act / Assert
        assert bucket.allow(5.0) is False
        assert bucket.tokens == pytest.approx(0.0)


@pytest.mark.unit
class TestRateLimitRule:
    """Test rule validation."""

    @pytest.mark.parametrize(
        "kwargs",
        [{"rate": 0, "burst": 1}, {"rate": 1, "burst": 0}, {"rate": 1, "burst": 1, "idle_seconds": 0}],
    )
    def test_rejects_non_positive_values(self, kwargs):
        with pytest.raises(ValueError):
            RateLimitRule(**kwargs)

    def test_retry_after_is_one_token_refill(self):
        assert RateLimitRule(rate=4.0, burst=1).retry_after_seconds == pytest.approx(0.25)


@pytest.mark.unit
class TestInMemoryRateLimiter:
    """Test per-client isolation and idle eviction."""

    def test_clients_have_independent_buckets(self):
        # Arrange
        clock = FakeClock()
        limiter = InMemoryRateLimiter(RateLimitRule(rate=1.0, burst=1), clock=clock)

        # Act / Assert
        assert limiter.allow("10.0.0.1") is True
        assert limiter.allow("10.0.0.1") is False
        assert limiter.allow("10.0.0.2") is True

    def test_rejected_call_still_refreshes_last_seen(self):
        # Arrange
        clock = FakeClock()
        limiter = InMemoryRateLimiter(
            RateLimitRule(rate=0.001, burst=1, idle_seconds=10), clock=clock
        )
        limiter.allow("a")
        clock.advance(8)
        assert limiter.allow("a") is False

        # Act
        clock.advance(8)
        evicted = limiter.sweep()

        # Assert
        assert evicted == 0
        assert "a" in limiter

    def test_sweep_evicts_only_idle_clients(self):
        # Arrange
        clock = FakeClock()
        logger = Mock()
        limiter = InMemoryRateLimiter(
            RateLimitRule(rate=1.0, burst=5, idle_seconds=60), clock=clock, logger=logger
        )
        limiter.allow("idle")
        clock.advance(50)
        limiter.allow("active")
        clock.advance(20)

        # Act
        evicted = limiter.sweep()

        # Assert
        assert evicted == 1
        assert "idle" not in limiter
        assert "active" in limiter
        assert len(limiter) == 1
        logger.debug.assert_called_once()

    def test_evicted_client_starts_with_full_bucket(self):
        # Arrange
        clock = FakeClock()
        limiter = InMemoryRateLimiter(
            RateLimitRule(rate=0.001, burst=2, idle_seconds=1), clock=clock
        )
        limiter.allow("c")
        limiter.allow("c")
        assert limiter.allow("c") is False
        clock.advance(5)
        limiter.sweep()

        # Act / Assert
        assert limiter.allow("c") is True
        assert limiter.allow("c") is True

    async def test_run_sweeper_stops_on_cancel(self):
        # Arrange
        limiter = InMemoryRateLimiter(RateLimitRule(rate=1.0, burst=1))
        task = asyncio.create_task(limiter.run_sweeper(interval_seconds=0.001))
        await asyncio.sleep(0.01)

        # Act
        task.cancel()

        # Assert
        with pytest.raises(asyncio.CancelledError):
            await task

    async def test_run_sweeper_survives_failed_sweep(self):
        # Arrange
        clock = Mock(
            side_effect=itertools.chain(
                [0.0, RuntimeError("clock unavailable")], itertools.repeat(1000.0)
            )
        )
        logger = Mock()
        limiter = InMemoryRateLimiter(
            RateLimitRule(rate=1.0, burst=1, idle_seconds=60), clock=clock, logger=logger
        )
        limiter.allow("idle")

        # Act
        task = asyncio.create_task(limiter.run_sweeper(interval_seconds=0.001))
        for _ in range(200):
            await asyncio.sleep(0.005)
            if "idle" not in limiter:
                break
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        # Assert
        logger.error.assert_called_once()
        assert logger.error.call_args.args == ("Rate limiter sweep failed",)
        assert isinstance(logger.error.call_args.kwargs["error"], RuntimeError)
        assert "idle" not in limiter
