from __future__ import annotations

from enum import Enum


class SessionState(str, Enum):
    """Where a participant stands, derived from registry, queue and partner membership."""

    IDLE = "idle"
    WAITING = "waiting"
    PAIRED = "paired"
    TERMINATED = "terminated"


__all__ = ["SessionState"]
