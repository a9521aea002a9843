"""WebSocket admission control."""

from __future__ import annotations

import asyncio
from typing import Any


class ConnectionManager:
    """Caps how many websockets are admitted at once.

    Admission is tracked per websocket object so a double release is harmless.
    """

    def __init__(self, *, max_connections: int) -> None:
        self.capacity = max(1, int(max_connections))
        self._lock = asyncio.Lock()
        self._admitted: set[int] = set()

    async def admit(self, ws: Any) -> bool:
        """Reserve a slot for ``ws`` (without accepting it)."""
        async with self._lock:
            if len(self._admitted) >= self.capacity:
                return False
            self._admitted.add(id(ws))
            return True

    async def release(self, ws: Any) -> None:
        async with self._lock:
            self._admitted.discard(id(ws))

    def get_connection_count(self) -> int:
        return len(self._admitted)


__all__ = ["ConnectionManager"]
