from __future__ import annotations

from pairline.config.protocol import ERROR_NOT_FOUND

from .protocol import ProtocolError


class NotFoundError(ProtocolError):
    code = ERROR_NOT_FOUND

    def __init__(self, connection_id: str) -> None:
        super().__init__(
            "connection not found",
            reason_code="connection_not_found",
            details={"connection_id": connection_id},
        )
        self.connection_id = connection_id


__all__ = ["NotFoundError"]
