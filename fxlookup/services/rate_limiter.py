from __future__ import annotations

"""Process-wide token bucket used for request admission.

One token is refilled per second up to a burst of 10. The bucket starts full,
so a cold service admits 10 requests immediately and then one per second.
"""
import threading
import time
from typing import Callable

REFILL_PER_SECOND = 1.0
BURST = 10


class TokenBucket:
    """Thread-safe token bucket.

    ``try_acquire`` refills, checks and decrements under a single lock so that
    concurrent callers can never be admitted beyond the available tokens.
    """

    def __init__(
        self,
        rate: float = REFILL_PER_SECOND,
        burst: int = BURST,
        clock: Callable[[], float] = time.monotonic,
    ):
        if rate <= 0:
            raise ValueError("refill rate must be positive")
        if burst < 1:
            raise ValueError("burst must be at least 1")
        self._rate = rate
        self._burst = burst
        self._clock = clock
        self._tokens = float(burst)
        self._last = clock()
        self._lock = threading.Lock()

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def burst(self) -> int:
        return self._burst

    def try_acquire(self) -> bool:
        with self._lock:
            now = self._clock()
            elapsed = now - self._last
            if elapsed > 0:
                self._tokens = min(self._burst, self._tokens + elapsed * self._rate)
                self._last = now
            if self._tokens >= 1.0:
                self._tokens -= 1.0
                return True
            return False
