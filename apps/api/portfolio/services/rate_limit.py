"""Fixed-window request rate limiting keyed by client identifier."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class RateLimitDecision:
    allowed: bool
    limit: int
    remaining: int
    reset_at: float

    def retry_after(self, now: float) -> int:
        return max(0, int(self.reset_at - now + 0.999))


@dataclass(slots=True)
class _Window:
    count: int
    reset_at: float


class RateLimiter:
    """Counts hits per key inside a fixed window; expired windows restart at zero."""

    def __init__(self, limit: int, window_seconds: float, clock: Callable[[], float] = time.time) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._lock = threading.Lock()

    def now(self) -> float:
        return self._clock()

    def hit(self, key: str) -> RateLimitDecision:
        now = self._clock()
        with self._lock:
            self._evict_expired(now)
            window = self._windows.get(key)
            if window is None:
                window = _Window(count=0, reset_at=now + self.window_seconds)
                self._windows[key] = window
            window.count += 1
            return RateLimitDecision(
                allowed=window.count <= self.limit,
                limit=self.limit,
                remaining=max(0, self.limit - window.count),
                reset_at=window.reset_at,
            )

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    def _evict_expired(self, now: float) -> None:
        expired = [key for key, window in self._windows.items() if now >= window.reset_at]
        for key in expired:
            del self._windows[key]
