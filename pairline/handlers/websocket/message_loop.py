"""WebSocket message loop: parse envelopes and hand events to the session controller."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import WebSocket, WebSocketDisconnect

from pairline.errors import build_error_payload
from pairline.state.connection import ConnectionId
from pairline.config.websocket import WS_KEY_TYPE, WS_KEY_PAYLOAD
from pairline.handlers.limits import SlidingWindowRateLimiter
from pairline.matchmaking.controller import SessionController
from pairline.config.protocol import (
    EVENT_PING,
    EVENT_PONG,
    EVENT_ERROR,
    CONTROL_EVENTS,
    ERROR_INVALID_MESSAGE,
)

from .outbox import Outbox
from .parser import parse_client_message
from .limits import consume_limiter
from .lifecycle import WebSocketLifecycle

logger = logging.getLogger(__name__)


async def _recv_frame_with_watchdog(
    ws: WebSocket,
    lifecycle: WebSocketLifecycle,
    tick_s: float,
) -> tuple[dict[str, Any] | None, bool]:
    try:
        message = await asyncio.wait_for(ws.receive(), timeout=tick_s * 2)
    except TimeoutError:
        return None, lifecycle.should_close()
    if message.get("type") == "websocket.disconnect":
        raise WebSocketDisconnect(message.get("code", 1000), message.get("reason"))
    return message, False


def _send_invalid_message(outbox: Outbox, message: str, reason_code: str) -> None:
    outbox.deliver(EVENT_ERROR, build_error_payload(ERROR_INVALID_MESSAGE, message, reason_code=reason_code))


def _handle_control_message(outbox: Outbox, msg_type: str) -> bool:
    if msg_type not in CONTROL_EVENTS:
        return False
    if msg_type == EVENT_PING:
        outbox.deliver(EVENT_PONG, {})
    return True


async def run_message_loop(
    ws: WebSocket,
    connection_id: ConnectionId,
    outbox: Outbox,
    lifecycle: WebSocketLifecycle,
    message_limiter: SlidingWindowRateLimiter,
    controller: SessionController,
    *,
    watchdog_tick_s: float,
) -> None:
    try:
        while True:
            frame, should_exit = await _recv_frame_with_watchdog(ws, lifecycle, watchdog_tick_s)
            if should_exit:
                return
            if frame is None:
                continue

            lifecycle.touch()

            raw = frame.get("text")
            if not isinstance(raw, str):
                _send_invalid_message(outbox, "only text frames are supported", "binary_frame")
                continue

            try:
                msg = parse_client_message(raw)
            except ValueError as exc:
                _send_invalid_message(outbox, str(exc), "invalid_message")
                continue

            msg_type = msg[WS_KEY_TYPE]
            if _handle_control_message(outbox, msg_type):
                continue
            if not consume_limiter(outbox, message_limiter):
                continue

            controller.handle_event(connection_id, msg_type, msg[WS_KEY_PAYLOAD])
    except WebSocketDisconnect:
        logger.debug("WebSocket disconnected id=%s", connection_id)


__all__ = ["run_message_loop"]
