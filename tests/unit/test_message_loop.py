from __future__ import annotations

import json
from typing import Any
from collections import deque

import pytest

from pairline.handlers.limits import SlidingWindowRateLimiter
from pairline.handlers.websocket.lifecycle import WebSocketLifecycle
from pairline.handlers.websocket.message_loop import run_message_loop


class _ScriptedWebSocket:
    """Replays queued ASGI receive messages, then reports a client disconnect."""

    def __init__(self, frames: list[dict[str, Any]]) -> None:
        self._frames = deque(frames)

    async def receive(self) -> dict[str, Any]:
        if self._frames:
            return self._frames.popleft()
        return {"type": "websocket.disconnect", "code": 1000}


class _RecordingOutbox:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def deliver(self, event: str, payload: dict[str, Any]) -> None:
        self.events.append((event, payload))


class _RecordingController:
    def __init__(self) -> None:
        self.handled: list[tuple[str, str, dict[str, Any]]] = []

    def handle_event(self, connection_id: str, event_kind: str, payload: dict[str, Any] | None = None) -> None:
        self.handled.append((connection_id, event_kind, payload or {}))


class _Clock:
    def __call__(self) -> float:
        return 0.0


def _text(msg_type: str, payload: dict[str, Any] | None = None) -> dict[str, Any]:
    return {"type": "websocket.receive", "text": json.dumps({"type": msg_type, "payload": payload or {}})}


async def _run(frames: list[dict[str, Any]], *, limit: int = 0) -> tuple[_RecordingOutbox, _RecordingController]:
    ws = _ScriptedWebSocket(frames)
    outbox = _RecordingOutbox()
    controller = _RecordingController()
    lifecycle = WebSocketLifecycle(ws, idle_timeout_s=0, watchdog_tick_s=1.0, max_connection_duration_s=0)
    limiter = SlidingWindowRateLimiter(limit=limit, window_seconds=60, now_fn=_Clock())
    await run_message_loop(ws, "conn-1", outbox, lifecycle, limiter, controller, watchdog_tick_s=1.0)
    return outbox, controller


@pytest.mark.asyncio
async def test_rate_limited_messages_are_not_dispatched() -> None:
    ready = {"name": "Alice", "gender": "female"}
    outbox, controller = await _run([_text("ready", ready), _text("ready", ready)], limit=1)

    assert controller.handled == [("conn-1", "ready", ready)]
    assert len(outbox.events) == 1
    event, payload = outbox.events[0]
    assert event == "error"
    assert payload["code"] == "rate_limited"


@pytest.mark.asyncio
async def test_ping_is_answered_without_reaching_controller() -> None:
    outbox, controller = await _run([_text("ping")], limit=1)

    assert outbox.events == [("pong", {})]
    assert controller.handled == []


@pytest.mark.asyncio
async def test_binary_frame_is_rejected_and_loop_continues() -> None:
    frames = [
        {"type": "websocket.receive", "bytes": b"\x00"},
        _text("endCall"),
    ]
    outbox, controller = await _run(frames)

    assert len(outbox.events) == 1
    event, payload = outbox.events[0]
    assert event == "error"
    assert payload["code"] == "invalid_message"
    assert payload["details"]["reason_code"] == "binary_frame"
    assert controller.handled == [("conn-1", "endCall", {})]


@pytest.mark.asyncio
async def test_invalid_json_is_rejected_and_loop_continues() -> None:
    frames = [{"type": "websocket.receive", "text": "not json"}, _text("stopMatchmaking")]
    outbox, controller = await _run(frames)

    assert [event for event, _ in outbox.events] == ["error"]
    assert outbox.events[0][1]["details"]["reason_code"] == "invalid_message"
    assert controller.handled == [("conn-1", "stopMatchmaking", {})]
