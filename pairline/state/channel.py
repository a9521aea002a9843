from __future__ import annotations

from typing import Any, Protocol


class OutboundChannel(Protocol):
    """Anything that can push an event to one participant without blocking."""

    def deliver(self, event: str, payload: dict[str, Any]) -> None: ...


__all__ = ["OutboundChannel"]
