"""
Unit tests for the fixed-window rate limiter.
"""

import threading

import pytest

from app.core.ratelimit import RateLimiter


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def limiter(clock):
    return RateLimiter(max_requests=3, window_seconds=60, clock=clock)


class TestRateLimiter:
    def test_allows_up_to_limit(self, limiter):
        assert [limiter.hit("alice") for _ in range(4)] == [True, True, True, False]

    def test_identifiers_are_independent(self, limiter):
        for _ in range(3):
            limiter.hit("alice")

        assert limiter.hit("alice") is False
        assert limiter.hit("bob") is True

    def test_window_resets(self, limiter, clock):
        for _ in range(4):
            limiter.hit("alice")

        clock.advance(60)
        assert limiter.hit("alice") is True

    def test_window_not_extended_by_hits(self, limiter, clock):
        limiter.hit("alice")
        clock.advance(59)
        for _ in range(2):
            limiter.hit("alice")
        assert limiter.hit("alice") is False

        clock.advance(1)
        assert limiter.hit("alice") is True

    def test_expired_entries_purged(self, limiter, clock):
        limiter.hit("alice")
        limiter.hit("bob")
        assert len(limiter) == 2

        clock.advance(61)
        limiter.hit("carol")
        assert len(limiter) == 1

    def test_retry_after(self, limiter, clock):
        limiter.hit("alice")
        clock.advance(20.5)

        assert limiter.retry_after("alice") == 40
        assert limiter.retry_after("nobody") == 0

    def test_reset(self, limiter):
        for _ in range(4):
            limiter.hit("alice")

        limiter.reset()
        assert len(limiter) == 0
        assert limiter.hit("alice") is True

    def test_len_waits_for_lock(self, limiter):
        limiter.hit("alice")
        sizes = []

        with limiter._lock:
            reader = threading.Thread(target=lambda: sizes.append(len(limiter)))
            reader.start()
            reader.join(timeout=0.1)
            assert reader.is_alive()
            assert sizes == []

        reader.join(timeout=5)
        assert sizes == [1]
