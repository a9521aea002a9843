"""Rate limiting utilities for WebSocket message handling."""

from __future__ import annotations

import math
from typing import Any

from pairline.errors import RateLimitError, build_error_payload
from pairline.handlers.limits import SlidingWindowRateLimiter
from pairline.config.protocol import EVENT_ERROR, ERROR_RATE_LIMITED
from pairline.state.channel import OutboundChannel


def consume_limiter(channel: OutboundChannel, limiter: SlidingWindowRateLimiter) -> bool:
    """Charge one message to ``limiter``; on saturation tell the client and return False."""
    try:
        limiter.consume()
    except RateLimitError as exc:
        retry_in_s = int(max(1, math.ceil(float(exc.retry_in)))) if exc.retry_in else 1
        details: dict[str, Any] = {
            "retry_in": retry_in_s,
            "limit": limiter.limit,
            "window_seconds": int(limiter.window_seconds),
        }
        channel.deliver(
            EVENT_ERROR,
            build_error_payload(
                ERROR_RATE_LIMITED,
                f"message rate limit: at most {limiter.limit} per {int(limiter.window_seconds)} seconds; "
                f"retry in {retry_in_s} seconds",
                details=details,
                reason_code="message_rate_limited",
            ),
        )
        return False
    return True


__all__ = ["consume_limiter"]
