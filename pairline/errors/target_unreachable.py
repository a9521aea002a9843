from __future__ import annotations

from pairline.config.protocol import ERROR_TARGET_UNREACHABLE

from .protocol import ProtocolError


class TargetUnreachableError(ProtocolError):
    code = ERROR_TARGET_UNREACHABLE

    def __init__(self, target_id: str, message: str) -> None:
        super().__init__(message, reason_code="target_unreachable", details={"to": target_id})
        self.target_id = target_id


__all__ = ["TargetUnreachableError"]
