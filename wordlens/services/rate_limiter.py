"""Fixed-window rate limiter.

Counts requests per identifier (client IP) inside a time window. Created
once per application and passed to the middleware that uses it.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class RateLimitEntry:
    count: int
    reset_at: float


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of a rate limit check."""

    allowed: bool
    remaining: int
    reset_at: float


class RateLimiter:
    """Allow at most ``max_requests`` per identifier in each window."""

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._entries: dict[str, RateLimitEntry] = {}

    def check(self, identifier: str) -> RateLimitDecision:
        """Record a request and decide whether it is allowed."""
        now = self._clock()
        self._cleanup(now)

        entry = self._entries.get(identifier)
        if entry is None:
            entry = RateLimitEntry(count=1, reset_at=now + self.window_seconds)
            self._entries[identifier] = entry
            return RateLimitDecision(True, self.max_requests - 1, entry.reset_at)

        if entry.count >= self.max_requests:
            return RateLimitDecision(False, 0, entry.reset_at)

        entry.count += 1
        return RateLimitDecision(True, self.max_requests - entry.count, entry.reset_at)

    def reset(self, identifier: str | None = None) -> None:
        if identifier is None:
            self._entries.clear()
        else:
            self._entries.pop(identifier, None)

    def _cleanup(self, now: float) -> None:
        expired = [key for key, entry in self._entries.items() if now >= entry.reset_at]
        for key in expired:
            del self._entries[key]
