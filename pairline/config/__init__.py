"""Configuration module exports (env-resolved constants only)."""

from .server import HOST, PORT
from .limits import (
    MAX_CONCURRENT_CONNECTIONS,
)

__all__ = [
    "HOST",
    "MAX_CONCURRENT_CONNECTIONS",
    "PORT",
]
