"""WebSocket protocol configuration and constants."""

from __future__ import annotations

import os

WS_ENDPOINT_PATH = (os.getenv("WS_ENDPOINT_PATH") or "").strip() or "/ws"

# Envelope keys
WS_KEY_TYPE = "type"
WS_KEY_PAYLOAD = "payload"

# Close codes
WS_CLOSE_BUSY_CODE = 4002
WS_CLOSE_IDLE_CODE = 4000
WS_CLOSE_MAX_DURATION_CODE = 4003

WS_CLOSE_IDLE_REASON = "idle timeout"
WS_CLOSE_MAX_DURATION_REASON = "max connection duration reached"

# Idle watchdog. Waiting or paired connections never count as idle.
WS_IDLE_TIMEOUT_S = float(os.getenv("WS_IDLE_TIMEOUT_S", "300"))
WS_WATCHDOG_TICK_S = float(os.getenv("WS_WATCHDOG_TICK_S", "5"))

# 0 disables the hard cap.
WS_MAX_CONNECTION_DURATION_S = float(os.getenv("WS_MAX_CONNECTION_DURATION_S", "0"))

_WS_OUTBOUND_QUEUE_MAX_RAW = (os.getenv("WS_OUTBOUND_QUEUE_MAX") or "").strip()
try:
    WS_OUTBOUND_QUEUE_MAX: int = int(_WS_OUTBOUND_QUEUE_MAX_RAW) if _WS_OUTBOUND_QUEUE_MAX_RAW else 256
except Exception:
    WS_OUTBOUND_QUEUE_MAX = 256
WS_OUTBOUND_QUEUE_MAX = max(1, int(WS_OUTBOUND_QUEUE_MAX))

__all__ = [
    "WS_ENDPOINT_PATH",
    "WS_KEY_TYPE",
    "WS_KEY_PAYLOAD",
    "WS_CLOSE_BUSY_CODE",
    "WS_CLOSE_IDLE_CODE",
    "WS_CLOSE_MAX_DURATION_CODE",
    "WS_CLOSE_IDLE_REASON",
    "WS_CLOSE_MAX_DURATION_REASON",
    "WS_IDLE_TIMEOUT_S",
    "WS_WATCHDOG_TICK_S",
    "WS_MAX_CONNECTION_DURATION_S",
    "WS_OUTBOUND_QUEUE_MAX",
]
