"""Session lifecycle controller: the single entry point for participant events.

Every inbound event is handled synchronously and to completion, so the
registry, queue and partner directory never observe a half-applied
transition. Outbound notifications go through each connection's channel and
never block.
"""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable

from pairline.config.matchmaking import MAX_CHAT_MESSAGE_LENGTH, MAX_DISPLAY_NAME_LENGTH
from pairline.errors import ProtocolError, AlreadyPairedError, MalformedRequestError
from pairline.state.gender import GenderTag
from pairline.state.channel import OutboundChannel
from pairline.state.session import SessionState
from pairline.state.connection import Connection, ConnectionId
from pairline.config.protocol import (
    EVENT_READY,
    EVENT_ERROR,
    EVENT_SIGNAL,
    EVENT_MATCHED,
    EVENT_END_CALL,
    EVENT_NEXT_MATCH,
    EVENT_DISCONNECT,
    EVENT_CHAT_MESSAGE,
    SYSTEM_CODE_MATCHED,
    EVENT_SYSTEM_MESSAGE,
    PARTNER_LOST_MESSAGE,
    ERROR_INVALID_MESSAGE,
    EVENT_STOP_MATCHMAKING,
    SYSTEM_CODE_PARTNER_LOST,
)

from .relay import RelayRouter
from .queue import MatchmakingQueue
from .partners import PartnerDirectory
from .registry import IdFactory, ConnectionRegistry

logger = logging.getLogger(__name__)

EventHandler = Callable[[ConnectionId, dict[str, Any]], None]


class SessionController:
    def __init__(
        self,
        *,
        id_factory: IdFactory | None = None,
        max_display_name_length: int = MAX_DISPLAY_NAME_LENGTH,
        max_chat_message_length: int = MAX_CHAT_MESSAGE_LENGTH,
    ) -> None:
        self.registry = ConnectionRegistry(id_factory=id_factory)
        self.queue = MatchmakingQueue(self.registry)
        self.partners = PartnerDirectory()
        self.router = RelayRouter(self.registry)
        self._max_display_name_length = max(1, int(max_display_name_length))
        self._max_chat_message_length = max(1, int(max_chat_message_length))
        self._handlers: dict[str, EventHandler] = {
            EVENT_READY: self._handle_ready,
            EVENT_STOP_MATCHMAKING: self._handle_stop_matchmaking,
            EVENT_NEXT_MATCH: self._handle_next_match,
            EVENT_SIGNAL: self._handle_signal,
            EVENT_CHAT_MESSAGE: self._handle_chat_message,
            EVENT_END_CALL: self._handle_end_call,
            EVENT_DISCONNECT: self._handle_disconnect,
        }

    # -- public surface -------------------------------------------------

    def connect(self, channel: OutboundChannel) -> ConnectionId:
        connection_id = self.registry.register(channel)
        logger.info("connection registered id=%s active=%s", connection_id, len(self.registry))
        return connection_id

    def disconnect(self, connection_id: ConnectionId) -> None:
        self.handle_event(connection_id, EVENT_DISCONNECT, {})

    def handle_event(self, connection_id: ConnectionId, event_kind: str, payload: dict[str, Any] | None = None) -> None:
        handler = self._handlers.get(event_kind)
        try:
            if handler is None:
                raise MalformedRequestError(
                    f"message type '{event_kind}' is not supported",
                    code=ERROR_INVALID_MESSAGE,
                    reason_code="unknown_message_type",
                )
            handler(connection_id, payload or {})
        except ProtocolError as exc:
            logger.info("event %s from %s rejected: %s", event_kind, connection_id, exc.message)
            self._notify(connection_id, EVENT_ERROR, exc.to_payload())

    def state_of(self, connection_id: ConnectionId) -> SessionState:
        if connection_id not in self.registry:
            return SessionState.TERMINATED
        if connection_id in self.partners:
            return SessionState.PAIRED
        if connection_id in self.queue:
            return SessionState.WAITING
        return SessionState.IDLE

    def is_engaged(self, connection_id: ConnectionId) -> bool:
        return self.state_of(connection_id) in (SessionState.WAITING, SessionState.PAIRED)

    def stats(self) -> dict[str, int]:
        return {
            "connections": len(self.registry),
            "waiting": len(self.queue),
            "pairs": len(self.partners),
        }

    # -- event handlers -------------------------------------------------

    def _handle_ready(self, connection_id: ConnectionId, payload: dict[str, Any]) -> None:
        conn = self.registry.require(connection_id)
        name, gender = self._parse_profile(payload)
        self._end_session(connection_id)
        self.registry.set_profile(connection_id, name, gender)
        self._enter_queue(conn)

    def _handle_next_match(self, connection_id: ConnectionId, payload: dict[str, Any]) -> None:
        conn = self.registry.require(connection_id)
        if "name" in payload or "gender" in payload or "genderTag" in payload:
            name, gender = self._parse_profile(payload)
            self.registry.set_profile(connection_id, name, gender)
        elif not conn.has_profile:
            raise MalformedRequestError(
                "send ready with name and gender before asking for the next match",
                reason_code="missing_profile",
            )
        # Ending the call and re-queueing happen in this one event.
        self._end_session(connection_id)
        self._enter_queue(conn)

    def _handle_stop_matchmaking(self, connection_id: ConnectionId, payload: dict[str, Any]) -> None:
        self._leave_queue(self.registry.require(connection_id))

    def _handle_end_call(self, connection_id: ConnectionId, payload: dict[str, Any]) -> None:
        conn = self.registry.require(connection_id)
        self._end_session(connection_id)
        self._leave_queue(conn)

    def _handle_signal(self, connection_id: ConnectionId, payload: dict[str, Any]) -> None:
        self.registry.require(connection_id)
        target_id = self._parse_target(payload)
        signal = payload.get("signal")
        if signal is None:
            raise MalformedRequestError("payload.signal is required", reason_code="missing_signal")
        self.router.relay(EVENT_SIGNAL, connection_id, target_id, signal)

    def _handle_chat_message(self, connection_id: ConnectionId, payload: dict[str, Any]) -> None:
        self.registry.require(connection_id)
        target_id = self._parse_target(payload)
        message = payload.get("message")
        # Text is relayed verbatim; only presence and length are checked.
        if not isinstance(message, str):
            raise MalformedRequestError("payload.message must be a string", reason_code="missing_message")
        if len(message) > self._max_chat_message_length:
            raise MalformedRequestError(
                "chat message is too long",
                reason_code="message_too_long",
                details={"max_length": self._max_chat_message_length},
            )
        self.router.relay(EVENT_CHAT_MESSAGE, connection_id, target_id, message)

    def _handle_disconnect(self, connection_id: ConnectionId, payload: dict[str, Any]) -> None:
        conn = self.registry.get(connection_id)
        if conn is None:
            return

        partner_id = self.partners.unbind(connection_id)
        if partner_id is not None:
            self._notify(
                partner_id,
                EVENT_SYSTEM_MESSAGE,
                {"code": SYSTEM_CODE_PARTNER_LOST, "message": PARTNER_LOST_MESSAGE},
            )
        self.queue.remove(connection_id)
        self.registry.remove(connection_id)
        logger.info(
            "connection removed id=%s partner=%s active=%s",
            connection_id,
            partner_id,
            len(self.registry),
        )

    # -- helpers --------------------------------------------------------

    def _parse_profile(self, payload: dict[str, Any]) -> tuple[str, GenderTag]:
        name = payload.get("name")
        if not isinstance(name, str) or not name.strip():
            raise MalformedRequestError("payload.name must be a non-empty string", reason_code="missing_name")
        name = name.strip()
        if len(name) > self._max_display_name_length:
            raise MalformedRequestError(
                "display name is too long",
                reason_code="name_too_long",
                details={"max_length": self._max_display_name_length},
            )

        gender = payload.get("gender", payload.get("genderTag"))
        if not isinstance(gender, str) or not gender.strip():
            raise MalformedRequestError("payload.gender must be a non-empty string", reason_code="missing_gender")
        return name, GenderTag.parse(gender)

    @staticmethod
    def _parse_target(payload: dict[str, Any]) -> ConnectionId:
        target_id = payload.get("to")
        if not isinstance(target_id, str) or not target_id.strip():
            raise MalformedRequestError("payload.to must be a connection id", reason_code="missing_target")
        return target_id.strip()

    def _enter_queue(self, conn: Connection) -> None:
        conn.available = True
        if self.queue.enqueue(conn.connection_id):
            logger.info(
                "matchmaking: queued id=%s name=%s gender=%s waiting=%s",
                conn.connection_id,
                conn.display_name,
                conn.gender.value if conn.gender else None,
                len(self.queue),
            )
        for first_id, second_id in self.queue.attempt_pairing():
            self._form_pair(first_id, second_id)

    def _leave_queue(self, conn: Connection) -> None:
        conn.available = False
        if self.queue.remove(conn.connection_id):
            logger.info("matchmaking: left queue id=%s waiting=%s", conn.connection_id, len(self.queue))

    def _end_session(self, connection_id: ConnectionId) -> ConnectionId | None:
        partner_id = self.partners.unbind(connection_id)
        if partner_id is None:
            return None
        self._notify(partner_id, EVENT_END_CALL, {})
        logger.info("call ended id=%s partner=%s", connection_id, partner_id)
        return partner_id

    def _form_pair(self, first_id: ConnectionId, second_id: ConnectionId) -> None:
        first = self.registry.require(first_id)
        second = self.registry.require(second_id)
        try:
            self.partners.bind(first_id, second_id)
        except AlreadyPairedError:
            logger.exception("matchmaking: refusing pair %s <-> %s", first_id, second_id)
            for conn in (first, second):
                if conn.connection_id not in self.partners:
                    self.queue.enqueue(conn.connection_id)
            return

        first.available = False
        second.available = False
        for conn, partner in ((first, second), (second, first)):
            conn.deliver(EVENT_MATCHED, {"partnerId": partner.connection_id})
            conn.deliver(
                EVENT_SYSTEM_MESSAGE,
                {
                    "code": SYSTEM_CODE_MATCHED,
                    "name": partner.display_name,
                    "message": f"Matched with {partner.display_name}, {_gender_label(partner)}",
                },
            )
        logger.info("matched: %s <-> %s", first_id, second_id)

    def _notify(self, connection_id: ConnectionId, event: str, payload: dict[str, Any]) -> None:
        conn = self.registry.get(connection_id)
        if conn is None:
            logger.debug("dropping %s for missing connection %s", event, connection_id)
            return
        conn.deliver(event, payload)


def _gender_label(conn: Connection) -> str:
    return (conn.gender or GenderTag.OTHER).value


__all__ = ["SessionController"]
