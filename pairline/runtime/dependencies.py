"""Runtime dependency construction (session controller + admission control)."""

from __future__ import annotations

import logging

from pairline.state import RuntimeDeps
from pairline.state.settings import AppSettings
from pairline.handlers.connections import ConnectionManager
from pairline.matchmaking.controller import SessionController

from .settings import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()

    controller = SessionController(
        max_display_name_length=settings.matchmaking.max_display_name_length,
        max_chat_message_length=settings.matchmaking.max_chat_message_length,
    )
    connections = ConnectionManager(max_connections=settings.limits.max_concurrent_connections)
    logger.info(
        "runtime: max_connections=%s idle_timeout_s=%s",
        connections.capacity,
        settings.websocket.idle_timeout_s,
    )

    return RuntimeDeps(
        connections=connections,
        controller=controller,
        settings=settings,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
