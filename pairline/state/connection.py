"""Per-participant connection record."""

from __future__ import annotations

from typing import Any
from dataclasses import dataclass

from .gender import GenderTag
from .channel import OutboundChannel

ConnectionId = str


@dataclass(slots=True, eq=False)
class Connection:
    connection_id: ConnectionId
    channel: OutboundChannel
    display_name: str | None = None
    gender: GenderTag | None = None
    available: bool = False

    @property
    def has_profile(self) -> bool:
        return self.display_name is not None and self.gender is not None

    def deliver(self, event: str, payload: dict[str, Any] | None = None) -> None:
        self.channel.deliver(event, payload or {})


__all__ = ["Connection", "ConnectionId"]
