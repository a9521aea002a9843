"""Per-connection outbound queue.

The session controller delivers events synchronously; the outbox turns each
delivery into a ``put_nowait`` and a single writer task sends them in order.
"""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any

from fastapi import WebSocket

from pairline.config.websocket import WS_OUTBOUND_QUEUE_MAX

from .errors import build_envelope, safe_send_envelope

logger = logging.getLogger(__name__)


class Outbox:
    def __init__(self, ws: WebSocket, *, max_pending: int = WS_OUTBOUND_QUEUE_MAX) -> None:
        self._ws = ws
        self._queue: asyncio.Queue[dict[str, Any]] = asyncio.Queue(maxsize=max(1, int(max_pending)))
        self._task: asyncio.Task | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def pending(self) -> int:
        return self._queue.qsize()

    def start(self) -> asyncio.Task:
        if self._task is None:
            self._task = asyncio.create_task(self._writer_loop())
        return self._task

    def deliver(self, event: str, payload: dict[str, Any]) -> None:
        if self._closed:
            logger.debug("outbox closed; dropping %s", event)
            return
        try:
            self._queue.put_nowait(build_envelope(event, payload))
        except asyncio.QueueFull:
            logger.warning("outbox full (%s pending); dropping %s", self._queue.qsize(), event)

    async def close(self) -> None:
        self._closed = True
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError, Exception):
            await self._task
        self._task = None

    async def _writer_loop(self) -> None:
        while True:
            envelope = await self._queue.get()
            if not await safe_send_envelope(self._ws, envelope):
                # Peer is gone; the message loop will see the disconnect.
                self._closed = True
                return


__all__ = ["Outbox"]
