"""Registry of live participant connections."""

from __future__ import annotations

import uuid
import logging
from collections.abc import Callable, Iterator

from pairline.errors import NotFoundError
from pairline.state.gender import GenderTag
from pairline.state.channel import OutboundChannel
from pairline.state.connection import Connection, ConnectionId

logger = logging.getLogger(__name__)

IdFactory = Callable[[], ConnectionId]


def _new_connection_id() -> ConnectionId:
    return uuid.uuid4().hex


class ConnectionRegistry:
    """Owns every ``Connection`` record for the lifetime of its channel.

    Removing a connection here does not touch the queue or the partner
    directory; the session controller cascades that explicitly.
    """

    def __init__(self, *, id_factory: IdFactory | None = None) -> None:
        self._id_factory = id_factory or _new_connection_id
        self._connections: dict[ConnectionId, Connection] = {}

    def register(self, channel: OutboundChannel) -> ConnectionId:
        connection_id = self._id_factory()
        if connection_id in self._connections:
            raise RuntimeError(f"connection id collision: {connection_id}")
        self._connections[connection_id] = Connection(connection_id=connection_id, channel=channel)
        return connection_id

    def get(self, connection_id: ConnectionId) -> Connection | None:
        return self._connections.get(connection_id)

    def require(self, connection_id: ConnectionId) -> Connection:
        conn = self._connections.get(connection_id)
        if conn is None:
            raise NotFoundError(connection_id)
        return conn

    def set_profile(self, connection_id: ConnectionId, name: str, gender: GenderTag) -> Connection:
        conn = self.require(connection_id)
        conn.display_name = name
        conn.gender = gender
        return conn

    def remove(self, connection_id: ConnectionId) -> Connection | None:
        return self._connections.pop(connection_id, None)

    def __contains__(self, connection_id: object) -> bool:
        return connection_id in self._connections

    def __len__(self) -> int:
        return len(self._connections)

    def __iter__(self) -> Iterator[Connection]:
        return iter(list(self._connections.values()))


__all__ = ["ConnectionRegistry", "IdFactory"]
