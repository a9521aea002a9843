from __future__ import annotations

from pairline.config.protocol import ERROR_INVALID_PAYLOAD

from .protocol import ProtocolError


class MalformedRequestError(ProtocolError):
    code = ERROR_INVALID_PAYLOAD


__all__ = ["MalformedRequestError"]
