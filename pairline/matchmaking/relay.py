"""Forward opaque signaling and chat payloads between connections."""

from __future__ import annotations

import logging
from typing import Any

from pairline.errors import TargetUnreachableError
from pairline.state.connection import ConnectionId
from pairline.config.protocol import (
    EVENT_SIGNAL,
    EVENT_CHAT_MESSAGE,
    CHAT_UNREACHABLE_MESSAGE,
    SIGNAL_UNREACHABLE_MESSAGE,
)

from .registry import ConnectionRegistry

logger = logging.getLogger(__name__)

RELAY_KINDS = frozenset({EVENT_SIGNAL, EVENT_CHAT_MESSAGE})


class RelayRouter:
    """Deliver a payload to a target id without looking inside it.

    Signals are tagged with the sender id so the target can answer; chat text
    is delivered untagged.
    """

    def __init__(self, registry: ConnectionRegistry) -> None:
        self._registry = registry

    def relay(self, kind: str, from_id: ConnectionId, to_id: ConnectionId, payload: Any) -> None:
        if kind not in RELAY_KINDS:
            raise ValueError(f"unsupported relay kind: {kind}")

        target = self._registry.get(to_id)
        if target is None:
            logger.info("relay: %s from %s to missing target %s", kind, from_id, to_id)
            message = SIGNAL_UNREACHABLE_MESSAGE if kind == EVENT_SIGNAL else CHAT_UNREACHABLE_MESSAGE
            raise TargetUnreachableError(to_id, message)

        if kind == EVENT_SIGNAL:
            target.deliver(EVENT_SIGNAL, {"from": from_id, "signal": payload})
        else:
            target.deliver(EVENT_CHAT_MESSAGE, {"message": payload})


__all__ = ["RELAY_KINDS", "RelayRouter"]
