import os
from concurrent.futures import ThreadPoolExecutor

import pytest

from metaboss.limiter import (
    RateLimiter,
    create_default_rate_limiter,
    create_rate_limiter,
    create_rate_limiter_with_capacity,
)


class FakeClock:
    def __init__(self):
        self.now = 0
        self.sleeps = 0

    def clock(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps += 1
        self.now += max(1, round(seconds * 1_000_000_000))


def make(capacity, interval):
    fake = FakeClock()
    return RateLimiter(capacity, interval, clock=fake.clock, sleep=fake.sleep), fake


def test_burst_up_to_capacity_without_sleeping():
    limiter, fake = make(3, 500)
    for _ in range(3):
        limiter.wait()
    assert fake.sleeps == 0
    assert fake.now == 0


def test_wait_sleeps_one_interval_when_empty():
    limiter, fake = make(2, 500)
    limiter.wait()
    limiter.wait()
    limiter.wait()
    assert fake.now == 500
    assert fake.sleeps >= 1


def test_try_acquire_reports_empty_bucket():
    limiter, fake = make(1, 1000)
    assert limiter.try_acquire() is True
    assert limiter.try_acquire() is False
    fake.now = 1000
    assert limiter.try_acquire() is True


def test_refill_never_exceeds_capacity():
    limiter, fake = make(2, 10)
    limiter.wait()
    limiter.wait()
    fake.now = 10_000
    results = [limiter.try_acquire() for _ in range(4)]
    assert results == [True, True, False, False]


def test_zero_interval_never_blocks():
    limiter, fake = make(1, 0)
    for _ in range(10):
        limiter.wait()
    assert fake.sleeps == 0


@pytest.mark.parametrize("capacity, interval", [(0, 10), (1, -1)])
def test_invalid_parameters(capacity, interval):
    with pytest.raises(ValueError):
        RateLimiter(capacity, interval)


def test_factories_set_capacity_and_interval():
    assert create_rate_limiter(1234).capacity == 1000
    assert create_rate_limiter(1234).interval_ns == 1234
    limiter = create_rate_limiter_with_capacity(7, 99)
    assert (limiter.capacity, limiter.interval_ns) == (7, 99)
    default = create_default_rate_limiter()
    assert default.capacity == (os.cpu_count() or 1)
    assert default.interval_ns == 200 * 1_000_000


def test_threads_share_tokens():
    limiter = RateLimiter(5, 10_000_000_000)
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: limiter.try_acquire(), range(8)))
    assert sorted(results) == [False, False, False, True, True, True, True, True]