# credvault/core/ratelimit.py

"""
Fixed-window rate limiter, keyed by client IP.

Counts requests per key inside windows of `window_seconds`; the count resets
when a window expires. In-memory only, so limits are per process.
"""

import time
from dataclasses import dataclass
from typing import Callable, Dict


@dataclass
class RateLimitConfig:
    enabled: bool = True
    max_requests: int = 100
    window_seconds: int = 15 * 60

    @classmethod
    def from_settings(cls, settings) -> "RateLimitConfig":
        return cls(
            enabled=settings.RATE_LIMIT_ENABLED,
            max_requests=settings.RATE_LIMIT_MAX_REQUESTS,
            window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
        )


@dataclass
class RateLimitResult:
    allowed: bool
    limit: int
    remaining: int
    reset_after: int  # seconds until the window resets


class _Window:
    __slots__ = ("started", "count")

    def __init__(self, started: float):
        self.started = started
        self.count = 0


class FixedWindowRateLimiter:
    def __init__(self, config: RateLimitConfig, time_fn: Callable[[], float] = time.monotonic):
        self.config = config
        self.time_fn = time_fn
        self.windows: Dict[str, _Window] = {}

    def hit(self, key: str) -> RateLimitResult:
        now = self.time_fn()
        window = self.windows.get(key)
        if window is None or now - window.started >= self.config.window_seconds:
            self._prune(now)
            window = _Window(now)
            self.windows[key] = window

        window.count += 1
        reset_after = max(1, int(window.started + self.config.window_seconds - now))
        return RateLimitResult(
            allowed=window.count <= self.config.max_requests,
            limit=self.config.max_requests,
            remaining=max(0, self.config.max_requests - window.count),
            reset_after=reset_after,
        )

    def _prune(self, now: float) -> None:
        expired = [k for k, w in self.windows.items() if now - w.started >= self.config.window_seconds]
        for k in expired:
            del self.windows[k]
