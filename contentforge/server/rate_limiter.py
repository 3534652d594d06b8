"""Fixed-window per-key rate limiter for the HTTP transport."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable


@dataclass
class _Window:
    count: int
    reset_at: float


class RateLimiter:
    """Counts requests per API key within a fixed time window.

    Advisory only: the counter lives in process memory and resets on
    restart.

    Args:
        limit: Maximum requests allowed per key per window.
        window_seconds: Window length (default one hour).
        clock: Time source, monotonic seconds.
    """

    def __init__(
        self,
        limit: int = 100,
        window_seconds: float = 60 * 60,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._lock = threading.Lock()

    def check(self, key: str) -> bool:
        """Record one request for ``key``; return False once over the limit."""
        with self._lock:
            now = self._clock()
            window = self._windows.get(key)
            if window is None or now > window.reset_at:
                window = _Window(count=0, reset_at=now + self.window_seconds)
                self._windows[key] = window
            window.count += 1
            return window.count <= self.limit

    def remaining(self, key: str) -> int:
        """Requests left for ``key`` in its current window."""
        with self._lock:
            window = self._windows.get(key)
            if window is None or self._clock() > window.reset_at:
                return self.limit
            return max(self.limit - window.count, 0)
