"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging
import contextlib

from fastapi import WebSocket

from pairline.state.runtime import RuntimeDeps
from pairline.config.websocket import WS_CLOSE_BUSY_CODE
from pairline.config.protocol import ERROR_SERVER_AT_CAPACITY
from pairline.handlers.limits import SlidingWindowRateLimiter

from .outbox import Outbox
from .errors import reject_connection
from .lifecycle import WebSocketLifecycle
from .message_loop import run_message_loop

logger = logging.getLogger(__name__)


async def _admit_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> bool:
    if not await runtime_deps.connections.admit(ws):
        await reject_connection(
            ws,
            error_code=ERROR_SERVER_AT_CAPACITY,
            message="Server cannot accept new connections. Please try again later.",
            close_code=WS_CLOSE_BUSY_CODE,
        )
        return False

    try:
        await ws.accept()
    except Exception:
        with contextlib.suppress(Exception):
            await runtime_deps.connections.release(ws)
        raise
    return True


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    controller = runtime_deps.controller
    settings = runtime_deps.settings
    admitted = False
    outbox: Outbox | None = None
    lifecycle: WebSocketLifecycle | None = None
    connection_id: str | None = None
    try:
        if not await _admit_connection(ws, runtime_deps):
            return
        admitted = True

        outbox = Outbox(ws, max_pending=settings.websocket.outbound_queue_max)
        outbox.start()
        registered_id = controller.connect(outbox)
        connection_id = registered_id

        lifecycle = WebSocketLifecycle(
            ws,
            is_busy_fn=lambda: controller.is_engaged(registered_id),
            idle_timeout_s=settings.websocket.idle_timeout_s,
            watchdog_tick_s=settings.websocket.watchdog_tick_s,
            max_connection_duration_s=settings.websocket.max_connection_duration_s,
        )
        lifecycle.start()

        logger.info(
            "WebSocket connection accepted id=%s. Active: %s",
            connection_id,
            runtime_deps.connections.get_connection_count(),
        )
        await run_message_loop(
            ws,
            registered_id,
            outbox,
            lifecycle,
            SlidingWindowRateLimiter.for_messages(settings.limits),
            controller,
            watchdog_tick_s=settings.websocket.watchdog_tick_s,
        )
    finally:
        if connection_id is not None:
            controller.disconnect(connection_id)

        if lifecycle is not None:
            with contextlib.suppress(Exception):
                await lifecycle.stop()

        if outbox is not None:
            with contextlib.suppress(Exception):
                await outbox.close()

        if admitted:
            with contextlib.suppress(Exception):
                await runtime_deps.connections.release(ws)
            logger.info(
                "WebSocket connection closed id=%s. Active: %s",
                connection_id,
                runtime_deps.connections.get_connection_count(),
            )


__all__ = ["handle_websocket_connection"]
