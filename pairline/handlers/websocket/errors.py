"""Error helpers for the WebSocket JSON envelope."""

from __future__ import annotations

import logging
from typing import Any

import orjson
from fastapi import WebSocket, WebSocketDisconnect

from pairline.errors import build_error_payload
from pairline.config.protocol import EVENT_ERROR
from pairline.config.websocket import WS_KEY_TYPE, WS_KEY_PAYLOAD

logger = logging.getLogger(__name__)


def build_envelope(msg_type: str, payload: dict[str, Any] | None = None) -> dict[str, Any]:
    return {
        WS_KEY_TYPE: msg_type,
        WS_KEY_PAYLOAD: payload or {},
    }


def encode_envelope(envelope: dict[str, Any]) -> str:
    return orjson.dumps(envelope).decode("utf-8")


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def safe_send_envelope(ws: WebSocket, envelope: dict[str, Any]) -> bool:
    return await safe_send_text(ws, encode_envelope(envelope))


async def send_error(
    ws: WebSocket,
    *,
    error_code: str,
    message: str,
    reason_code: str | None = None,
    details: dict[str, Any] | None = None,
) -> bool:
    payload = build_error_payload(error_code, message, details=details, reason_code=reason_code)
    return await safe_send_envelope(ws, build_envelope(EVENT_ERROR, payload))


async def reject_connection(
    ws: WebSocket,
    *,
    error_code: str,
    message: str,
    close_code: int,
) -> None:
    # Accept so we can send a structured error, then close.
    try:
        await ws.accept()
    except Exception:
        return
    await send_error(ws, error_code=error_code, message=message, reason_code=error_code)
    try:
        await ws.close(code=close_code, reason=message)
    except Exception:
        return


__all__ = [
    "build_envelope",
    "encode_envelope",
    "reject_connection",
    "safe_send_envelope",
    "safe_send_text",
    "send_error",
]
