"""Symmetric directory of current partners."""

from __future__ import annotations

from collections.abc import Iterator

from pairline.errors import AlreadyPairedError
from pairline.state.connection import ConnectionId


class PartnerDirectory:
    def __init__(self) -> None:
        self._partners: dict[ConnectionId, ConnectionId] = {}

    def bind(self, first: ConnectionId, second: ConnectionId) -> None:
        """Record ``first`` and ``second`` as each other's partner.

        Raises ``AlreadyPairedError`` without touching the directory if either
        side already has a partner.
        """
        if first == second:
            raise ValueError("a connection cannot be paired with itself")
        for connection_id in (first, second):
            existing = self._partners.get(connection_id)
            if existing is not None:
                raise AlreadyPairedError(connection_id, existing)
        self._partners[first] = second
        self._partners[second] = first

    def partner_of(self, connection_id: ConnectionId) -> ConnectionId | None:
        return self._partners.get(connection_id)

    def unbind(self, connection_id: ConnectionId) -> ConnectionId | None:
        """Drop the pairing that involves ``connection_id``; return the former partner."""
        partner_id = self._partners.pop(connection_id, None)
        if partner_id is not None and self._partners.get(partner_id) == connection_id:
            del self._partners[partner_id]
        return partner_id

    def pairs(self) -> Iterator[tuple[ConnectionId, ConnectionId]]:
        seen: set[ConnectionId] = set()
        for connection_id, partner_id in list(self._partners.items()):
            if connection_id in seen:
                continue
            seen.add(partner_id)
            yield connection_id, partner_id

    def __contains__(self, connection_id: object) -> bool:
        return connection_id in self._partners

    def __len__(self) -> int:
        return len(self._partners) // 2


__all__ = ["PartnerDirectory"]
