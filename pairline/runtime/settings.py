"""Load runtime settings.

Configuration values are resolved from the environment in `pairline/config/*`
and exposed here as structured dataclasses for the rest of the server.
"""

from __future__ import annotations

from pairline.config.server import HOST, PORT
from pairline.config.websocket import (
    WS_IDLE_TIMEOUT_S,
    WS_WATCHDOG_TICK_S,
    WS_OUTBOUND_QUEUE_MAX,
    WS_MAX_CONNECTION_DURATION_S,
)
from pairline.state.settings import (
    AppSettings,
    LimitsSettings,
    ServerSettings,
    WebSocketSettings,
    MatchmakingSettings,
)
from pairline.config.limits import (
    MAX_CONCURRENT_CONNECTIONS,
    WS_MESSAGE_WINDOW_SECONDS,
    WS_MAX_MESSAGES_PER_WINDOW,
)
from pairline.config.matchmaking import (
    MAX_CHAT_MESSAGE_LENGTH,
    MAX_DISPLAY_NAME_LENGTH,
)


def load_settings() -> AppSettings:
    return AppSettings(
        server=ServerSettings(host=HOST, port=PORT),
        limits=LimitsSettings(
            max_concurrent_connections=MAX_CONCURRENT_CONNECTIONS,
            ws_message_window_seconds=WS_MESSAGE_WINDOW_SECONDS,
            ws_max_messages_per_window=WS_MAX_MESSAGES_PER_WINDOW,
        ),
        websocket=WebSocketSettings(
            idle_timeout_s=WS_IDLE_TIMEOUT_S,
            watchdog_tick_s=WS_WATCHDOG_TICK_S,
            max_connection_duration_s=WS_MAX_CONNECTION_DURATION_S,
            outbound_queue_max=WS_OUTBOUND_QUEUE_MAX,
        ),
        matchmaking=MatchmakingSettings(
            max_display_name_length=MAX_DISPLAY_NAME_LENGTH,
            max_chat_message_length=MAX_CHAT_MESSAGE_LENGTH,
        ),
    )


__all__ = ["load_settings"]
