"""Matchmaking request limits (env-resolved constants only)."""

from __future__ import annotations

import os


def _get_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return int(default)
    try:
        return int(raw)
    except Exception:
        return int(default)


MAX_DISPLAY_NAME_LENGTH: int = max(1, _get_int("MAX_DISPLAY_NAME_LENGTH", 64))

MAX_CHAT_MESSAGE_LENGTH: int = max(1, _get_int("MAX_CHAT_MESSAGE_LENGTH", 4000))

__all__ = [
    "MAX_CHAT_MESSAGE_LENGTH",
    "MAX_DISPLAY_NAME_LENGTH",
]
