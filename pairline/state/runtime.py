"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from pairline.state.settings import AppSettings
    from pairline.handlers.connections import ConnectionManager
    from pairline.matchmaking.controller import SessionController


@dataclass(slots=True)
class RuntimeDeps:
    connections: ConnectionManager
    controller: SessionController
    settings: AppSettings

    async def shutdown(self) -> None:
        stats = self.controller.stats()
        logger.info(
            "runtime shutdown: dropping connections=%s waiting=%s pairs=%s",
            stats["connections"],
            stats["waiting"],
            stats["pairs"],
        )


__all__ = ["RuntimeDeps"]
