"""Event names and codes spoken over the participant channel."""

from __future__ import annotations

# Inbound (client -> server)
EVENT_READY = "ready"
EVENT_STOP_MATCHMAKING = "stopMatchmaking"
EVENT_NEXT_MATCH = "nextMatch"
EVENT_SIGNAL = "signal"
EVENT_CHAT_MESSAGE = "chatMessage"
EVENT_END_CALL = "endCall"

# Raised by the transport when the channel goes away; clients may not send it.
EVENT_DISCONNECT = "disconnect"

# Outbound (server -> client)
EVENT_MATCHED = "matched"
EVENT_SYSTEM_MESSAGE = "systemMessage"
EVENT_ERROR = "error"

# Transport control
EVENT_PING = "ping"
EVENT_PONG = "pong"

RESERVED_EVENTS = frozenset({EVENT_DISCONNECT})
CONTROL_EVENTS = frozenset({EVENT_PING, EVENT_PONG})

# systemMessage codes
SYSTEM_CODE_MATCHED = 100
SYSTEM_CODE_PARTNER_LOST = 101

PARTNER_LOST_MESSAGE = "Your partner has disconnected."

# Errors (payload.code values)
ERROR_INVALID_MESSAGE = "invalid_message"
ERROR_INVALID_PAYLOAD = "invalid_payload"
ERROR_NOT_FOUND = "not_found"
ERROR_TARGET_UNREACHABLE = "target_unreachable"
ERROR_RATE_LIMITED = "rate_limited"
ERROR_SERVER_AT_CAPACITY = "server_at_capacity"

SIGNAL_UNREACHABLE_MESSAGE = "Failed to send signal."
CHAT_UNREACHABLE_MESSAGE = "Failed to send message."

__all__ = [
    "CHAT_UNREACHABLE_MESSAGE",
    "CONTROL_EVENTS",
    "ERROR_INVALID_MESSAGE",
    "ERROR_INVALID_PAYLOAD",
    "ERROR_NOT_FOUND",
    "ERROR_RATE_LIMITED",
    "ERROR_SERVER_AT_CAPACITY",
    "ERROR_TARGET_UNREACHABLE",
    "EVENT_CHAT_MESSAGE",
    "EVENT_DISCONNECT",
    "EVENT_END_CALL",
    "EVENT_ERROR",
    "EVENT_MATCHED",
    "EVENT_NEXT_MATCH",
    "EVENT_PING",
    "EVENT_PONG",
    "EVENT_READY",
    "EVENT_SIGNAL",
    "EVENT_STOP_MATCHMAKING",
    "EVENT_SYSTEM_MESSAGE",
    "PARTNER_LOST_MESSAGE",
    "RESERVED_EVENTS",
    "SIGNAL_UNREACHABLE_MESSAGE",
    "SYSTEM_CODE_MATCHED",
    "SYSTEM_CODE_PARTNER_LOST",
]
