from __future__ import annotations

import itertools
from typing import Any
from collections.abc import Callable

import pytest

from pairline.matchmaking.controller import SessionController


class RecordingChannel:
    """Outbound channel that keeps every delivered event for assertions."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def deliver(self, event: str, payload: dict[str, Any]) -> None:
        self.events.append((event, payload))

    def of_type(self, event: str) -> list[dict[str, Any]]:
        return [payload for name, payload in self.events if name == event]

    def clear(self) -> None:
        self.events.clear()


def _sequential_ids() -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: f"conn-{next(counter)}"


@pytest.fixture
def controller() -> SessionController:
    return SessionController(id_factory=_sequential_ids(), max_display_name_length=16, max_chat_message_length=32)


@pytest.fixture
def connect(controller: SessionController) -> Callable[[], tuple[str, RecordingChannel]]:
    def _connect() -> tuple[str, RecordingChannel]:
        channel = RecordingChannel()
        return controller.connect(channel), channel

    return _connect


@pytest.fixture
def join(
    controller: SessionController,
    connect: Callable[[], tuple[str, RecordingChannel]],
) -> Callable[[str, str], tuple[str, RecordingChannel]]:
    """Connect a participant and send ``ready`` with the given profile."""

    def _join(name: str, gender: str) -> tuple[str, RecordingChannel]:
        connection_id, channel = connect()
        controller.handle_event(connection_id, "ready", {"name": name, "gender": gender})
        return connection_id, channel

    return _join
