"""
In-process request rate limiter.

Fixed window per identifier: the first request opens a window of
``window_seconds``; up to ``max_requests`` are allowed inside it.

One instance is built with the application and shared by every request
through ``app.state``; it is not a module-level singleton.
"""

import threading
import time
from typing import Callable


class _Bucket:
    __slots__ = ("count", "reset_at")

    def __init__(self, count: int, reset_at: float):
        self.count = count
        self.reset_at = reset_at


class RateLimiter:
    """Fixed-window request counter keyed by identifier."""

    def __init__(self, max_requests: int = 60, window_seconds: float = 60.0,
                 clock: Callable[[], float] = time.monotonic, ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._buckets: dict[str, _Bucket] = {}
        self._lock = threading.Lock()

    def hit(self, identifier: str) -> bool:
        """Record one request; returns False once ``identifier`` is over the limit."""
        now = self._clock()
        with self._lock:
            self._purge(now)

            bucket = self._buckets.get(identifier)
            if bucket is None or bucket.reset_at <= now:
                bucket = _Bucket(count=1, reset_at=now + self.window_seconds)
                self._buckets[identifier] = bucket
            else:
                bucket.count += 1

            return bucket.count <= self.max_requests

    def retry_after(self, identifier: str) -> int:
        """Seconds until the current window of ``identifier`` resets."""
        with self._lock:
            bucket = self._buckets.get(identifier)
            if bucket is None:
                return 0
            return max(0, int(bucket.reset_at - self._clock() + 0.999))

    def reset(self) -> None:
        with self._lock:
            self._buckets.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buckets)

    def _purge(self, now: float) -> None:
        expired = [key for key, bucket in self._buckets.items() if bucket.reset_at <= now]
        for key in expired:
            del self._buckets[key]
