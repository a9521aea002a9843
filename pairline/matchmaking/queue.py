"""Matchmaking queue: connections currently seeking a partner."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from pairline.state.connection import Connection, ConnectionId

from .pairing import pair_waiting
from .registry import ConnectionRegistry

logger = logging.getLogger(__name__)


class MatchmakingQueue:
    """Insertion-ordered set of waiting connection ids.

    Holds ids only; profiles and availability are read from the registry when
    a pairing pass runs.
    """

    def __init__(self, registry: ConnectionRegistry) -> None:
        self._registry = registry
        # dict keeps insertion order and gives O(1) membership/removal.
        self._waiting: dict[ConnectionId, None] = {}

    def enqueue(self, connection_id: ConnectionId) -> bool:
        if connection_id in self._waiting:
            return False
        self._waiting[connection_id] = None
        return True

    def remove(self, connection_id: ConnectionId) -> bool:
        if connection_id not in self._waiting:
            return False
        del self._waiting[connection_id]
        return True

    def dequeue_matched(self, connection_ids: Iterable[ConnectionId]) -> None:
        for connection_id in connection_ids:
            self._waiting.pop(connection_id, None)

    def snapshot(self) -> list[ConnectionId]:
        return list(self._waiting)

    def _resolve_waiting(self) -> list[Connection]:
        resolved: list[Connection] = []
        stale: list[ConnectionId] = []
        for connection_id in self._waiting:
            conn = self._registry.get(connection_id)
            if conn is None:
                stale.append(connection_id)
                continue
            resolved.append(conn)
        if stale:
            logger.warning("matchmaking: excising %s stale queue entries: %s", len(stale), stale)
            self.dequeue_matched(stale)
        return resolved

    def attempt_pairing(self) -> list[tuple[ConnectionId, ConnectionId]]:
        """Run one pairing pass and drop every matched id from the queue."""
        if len(self._waiting) < 2:
            return []

        pairs = pair_waiting(self._resolve_waiting())
        matched_ids = [conn.connection_id for pair in pairs for conn in pair]
        self.dequeue_matched(matched_ids)
        return [(first.connection_id, second.connection_id) for first, second in pairs]

    def __contains__(self, connection_id: object) -> bool:
        return connection_id in self._waiting

    def __len__(self) -> int:
        return len(self._waiting)

    def __iter__(self) -> Iterator[ConnectionId]:
        return iter(list(self._waiting))


__all__ = ["MatchmakingQueue"]
