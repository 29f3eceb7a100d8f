"""Token-bucket rate limiters for pacing network requests."""

from __future__ import annotations

import os
import threading
import time
from typing import Callable

from metaboss.settings import DEFAULT_RPC_DELAY_MS

_DEFAULT_DELAY_NS = DEFAULT_RPC_DELAY_MS * 1_000_000


class RateLimiter:
    """A thread-safe token bucket refilled with one token per interval."""

    def __init__(
        self,
        capacity: int,
        interval_ns: int,
        *,
        clock: Callable[[], int] = time.monotonic_ns,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if interval_ns < 0:
            raise ValueError("interval must not be negative")
        self.capacity = capacity
        self.interval_ns = interval_ns
        self._clock = clock
        self._sleep = sleep
        self._tokens = capacity
        self._last = clock()
        self._lock = threading.Lock()

    def _refill(self, now: int) -> None:
        if self._tokens >= self.capacity:
            self._last = now
            return
        added, _ = divmod(now - self._last, self.interval_ns)
        if added > 0:
            self._tokens = min(self.capacity, self._tokens + added)
            self._last += added * self.interval_ns
            if self._tokens >= self.capacity:
                self._last = now

    def try_acquire(self) -> bool:
        """Take a token if one is available, without blocking."""
        if self.interval_ns == 0:
            return True
        with self._lock:
            self._refill(self._clock())
            if self._tokens >= 1:
                self._tokens -= 1
                return True
            return False

    def wait(self) -> None:
        """Block until a token is available and take it."""
        if self.interval_ns == 0:
            return
        while True:
            with self._lock:
                now = self._clock()
                self._refill(now)
                if self._tokens >= 1:
                    self._tokens -= 1
                    return
                remaining_ns = max(1, self._last + self.interval_ns - now)
            self._sleep(remaining_ns / 1_000_000_000)


def create_default_rate_limiter(delay_ns: int = _DEFAULT_DELAY_NS) -> RateLimiter:
    """A limiter sized to the number of CPUs."""
    return RateLimiter(os.cpu_count() or 1, delay_ns)


def create_rate_limiter(delay: int) -> RateLimiter:
    """A limiter holding up to 1000 tokens, one added every `delay` nanoseconds."""
    return RateLimiter(1000, delay)


def create_rate_limiter_with_capacity(capacity: int, delay: int) -> RateLimiter:
    """A limiter with the given capacity, one token added every `delay` nanoseconds."""
    return RateLimiter(capacity, delay)