from __future__ import annotations


class AlreadyPairedError(Exception):
    """Raised when binding a connection that already has a partner."""

    def __init__(self, connection_id: str, partner_id: str) -> None:
        super().__init__(f"connection {connection_id} is already paired with {partner_id}")
        self.connection_id = connection_id
        self.partner_id = partner_id


__all__ = ["AlreadyPairedError"]
