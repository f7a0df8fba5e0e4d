"""
Sliding-window rate limiting for outbound hint generation calls.
"""

import threading
from typing import Callable, List

from lexeme_practice.util.clock import now_ms

WINDOW_MS = 60_000


class RateLimitExceeded(Exception):
    """Raised when the request quota for the current window is used up."""

    def __init__(self, limit: int, window_ms: int = WINDOW_MS):
        super().__init__(f"Rate limit exceeded ({limit} requests per {window_ms // 1000}s). Please try again later.")
        self.limit = limit
        self.window_ms = window_ms


class RateLimiter:
    """Fixed-size sliding window over request timestamps.

    Every check prunes timestamps that have left the trailing window, then
    rejects when ``max_requests_per_minute`` are still inside it. Rejected
    requests are not queued and do not count against the window.
    """

    def __init__(self, max_requests_per_minute: int = 20, window_ms: int = WINDOW_MS,
                 clock: Callable[[], int] = now_ms):
        """
        Args:
            max_requests_per_minute: Requests allowed inside one window
            window_ms: Window length in milliseconds
            clock: Returns the current time in epoch milliseconds
        """
        self.max_requests_per_minute = max_requests_per_minute
        self.window_ms = window_ms
        self._clock = clock
        self._timestamps: List[int] = []
        self._lock = threading.Lock()

    def _prune(self, now: int) -> None:
        cutoff = now - self.window_ms
        self._timestamps = [ts for ts in self._timestamps if ts > cutoff]

    def try_acquire(self) -> bool:
        """Record a request and return True, or return False if the window is full."""
        with self._lock:
            now = self._clock()
            self._prune(now)
            if len(self._timestamps) >= self.max_requests_per_minute:
                return False
            self._timestamps.append(now)
            return True

    def acquire(self) -> None:
        """Like try_acquire, but raise RateLimitExceeded on rejection."""
        if not self.try_acquire():
            raise RateLimitExceeded(self.max_requests_per_minute, self.window_ms)

    def remaining(self) -> int:
        with self._lock:
            self._prune(self._clock())
            return max(0, self.max_requests_per_minute - len(self._timestamps))

    def reset(self) -> None:
        with self._lock:
            self._timestamps = []

    @property
    def history(self) -> List[int]:
        with self._lock:
            return list(self._timestamps)
