from .gender import GenderTag
from .runtime import RuntimeDeps
from .session import SessionState
from .channel import OutboundChannel
from .settings import AppSettings
from .connection import Connection, ConnectionId

__all__ = [
    "AppSettings",
    "Connection",
    "ConnectionId",
    "GenderTag",
    "OutboundChannel",
    "RuntimeDeps",
    "SessionState",
]
