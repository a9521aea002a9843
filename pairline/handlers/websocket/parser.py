"""Client message parsing/validation for the ``{type, payload}`` envelope."""

from __future__ import annotations

import json
from typing import Any

from pairline.config.protocol import RESERVED_EVENTS
from pairline.config.websocket import WS_KEY_TYPE, WS_KEY_PAYLOAD


def parse_client_message(raw: str) -> dict[str, Any]:
    try:
        msg = json.loads(raw)
    except Exception as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise ValueError("message must be a JSON object")

    msg_type = msg.get(WS_KEY_TYPE)
    if not isinstance(msg_type, str) or not msg_type.strip():
        raise ValueError("message missing non-empty 'type'")
    msg_type = msg_type.strip()
    if msg_type in RESERVED_EVENTS:
        raise ValueError(f"message type '{msg_type}' is reserved for the server")

    payload = msg.get(WS_KEY_PAYLOAD, {})
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValueError("message 'payload' must be an object")

    return {WS_KEY_TYPE: msg_type, WS_KEY_PAYLOAD: payload}


__all__ = ["parse_client_message"]
