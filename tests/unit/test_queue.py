from __future__ import annotations

import logging

import pytest

from pairline.state.gender import GenderTag
from pairline.matchmaking.queue import MatchmakingQueue
from pairline.matchmaking.registry import ConnectionRegistry


class _NullChannel:
    def deliver(self, event: str, payload: dict) -> None:
        pass


@pytest.fixture
def registry() -> ConnectionRegistry:
    return ConnectionRegistry()


@pytest.fixture
def queue(registry: ConnectionRegistry) -> MatchmakingQueue:
    return MatchmakingQueue(registry)


def _waiting(registry: ConnectionRegistry, queue: MatchmakingQueue, gender: str) -> str:
    connection_id = registry.register(_NullChannel())
    conn = registry.set_profile(connection_id, gender, GenderTag(gender))
    conn.available = True
    queue.enqueue(connection_id)
    return connection_id


def test_enqueue_is_at_most_once(queue: MatchmakingQueue) -> None:
    assert queue.enqueue("a") is True
    assert queue.enqueue("a") is False
    assert len(queue) == 1


def test_remove_is_idempotent(queue: MatchmakingQueue) -> None:
    queue.enqueue("a")
    assert queue.remove("a") is True
    assert queue.remove("a") is False
    assert "a" not in queue


def test_dequeue_matched_keeps_order_of_rest(queue: MatchmakingQueue) -> None:
    for connection_id in ("a", "b", "c", "d"):
        queue.enqueue(connection_id)
    queue.dequeue_matched(["b", "d", "zzz"])
    assert queue.snapshot() == ["a", "c"]


def test_attempt_pairing_needs_two(registry: ConnectionRegistry, queue: MatchmakingQueue) -> None:
    _waiting(registry, queue, "male")
    assert queue.attempt_pairing() == []
    assert len(queue) == 1


def test_attempt_pairing_removes_matched(registry: ConnectionRegistry, queue: MatchmakingQueue) -> None:
    m1 = _waiting(registry, queue, "male")
    m2 = _waiting(registry, queue, "male")
    f1 = _waiting(registry, queue, "female")

    assert queue.attempt_pairing() == [(m1, f1)]
    assert queue.snapshot() == [m2]


def test_attempt_pairing_odd_other_bucket(registry: ConnectionRegistry, queue: MatchmakingQueue) -> None:
    o1 = _waiting(registry, queue, "other")
    o2 = _waiting(registry, queue, "other")
    o3 = _waiting(registry, queue, "other")

    assert queue.attempt_pairing() == [(o1, o2)]
    assert queue.snapshot() == [o3]


def test_attempt_pairing_excises_stale_ids(
    registry: ConnectionRegistry,
    queue: MatchmakingQueue,
    caplog: pytest.LogCaptureFixture,
) -> None:
    m1 = _waiting(registry, queue, "male")
    queue.enqueue("ghost")
    f1 = _waiting(registry, queue, "female")

    with caplog.at_level(logging.WARNING):
        assert queue.attempt_pairing() == [(m1, f1)]
    assert "ghost" not in queue
    assert "stale" in caplog.text
