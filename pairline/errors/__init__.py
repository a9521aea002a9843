"""Shared error types for the pairline server."""

from .payload import build_error_payload
from .protocol import ProtocolError
from .not_found import NotFoundError
from .malformed import MalformedRequestError
from .rate_limit import RateLimitError
from .already_paired import AlreadyPairedError
from .target_unreachable import TargetUnreachableError

__all__ = [
    "AlreadyPairedError",
    "MalformedRequestError",
    "NotFoundError",
    "ProtocolError",
    "RateLimitError",
    "TargetUnreachableError",
    "build_error_payload",
]
