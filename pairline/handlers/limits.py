"""Sliding-window rate limiter for inbound participant messages."""

from __future__ import annotations

import time
import collections
from collections.abc import Callable

from pairline.errors import RateLimitError
from pairline.state.settings import LimitsSettings

TimeFn = Callable[[], float]


class SlidingWindowRateLimiter:
    """Allow at most ``limit`` events in any ``window_seconds`` span.

    A limit or window of zero disables the limiter.
    """

    def __init__(
        self,
        *,
        limit: int,
        window_seconds: float,
        now_fn: TimeFn | None = None,
    ) -> None:
        self.limit = max(0, int(limit))
        self.window_seconds = max(0.0, float(window_seconds))
        self._now = now_fn or time.monotonic
        self._events: collections.deque[float] = collections.deque()

    @classmethod
    def for_messages(cls, limits: LimitsSettings) -> SlidingWindowRateLimiter:
        return cls(limit=limits.ws_max_messages_per_window, window_seconds=limits.ws_message_window_seconds)

    @property
    def enabled(self) -> bool:
        return self.limit > 0 and self.window_seconds > 0

    def _expire(self, now: float) -> None:
        cutoff = now - self.window_seconds
        while self._events and self._events[0] <= cutoff:
            self._events.popleft()

    def consume(self) -> None:
        """Record one event or raise ``RateLimitError`` if the window is full."""
        if not self.enabled:
            return

        now = self._now()
        self._expire(now)
        if len(self._events) >= self.limit:
            raise RateLimitError(
                retry_in=max(0.0, (self._events[0] + self.window_seconds) - now),
                limit=self.limit,
                window_seconds=self.window_seconds,
            )
        self._events.append(now)


__all__ = ["RateLimitError", "SlidingWindowRateLimiter"]
