"""Base class for request errors reported back to the sender."""

from __future__ import annotations

from typing import Any

from pairline.config.protocol import ERROR_INVALID_PAYLOAD

from .payload import build_error_payload


class ProtocolError(Exception):
    """A request that failed in a way the caller should hear about.

    Raised inside event handlers and turned into a single ``error`` event for
    the connection that sent the request. Never fatal.
    """

    code: str = ERROR_INVALID_PAYLOAD

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        reason_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code
        self.message = message
        self.reason_code = reason_code
        self.details = dict(details or {})

    def to_payload(self) -> dict[str, Any]:
        return build_error_payload(self.code, self.message, details=self.details, reason_code=self.reason_code)


__all__ = ["ProtocolError"]
