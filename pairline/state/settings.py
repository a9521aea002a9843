"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int
    ws_message_window_seconds: float
    ws_max_messages_per_window: int


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    idle_timeout_s: float
    watchdog_tick_s: float
    max_connection_duration_s: float
    outbound_queue_max: int


@dataclass(frozen=True, slots=True)
class MatchmakingSettings:
    max_display_name_length: int
    max_chat_message_length: int


@dataclass(frozen=True, slots=True)
class AppSettings:
    server: ServerSettings
    limits: LimitsSettings
    websocket: WebSocketSettings
    matchmaking: MatchmakingSettings


__all__ = [
    "AppSettings",
    "LimitsSettings",
    "MatchmakingSettings",
    "ServerSettings",
    "WebSocketSettings",
]
