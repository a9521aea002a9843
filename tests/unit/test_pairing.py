from __future__ import annotations

import pytest

from pairline.matchmaking.pairing import pair_waiting
from pairline.state.gender import GenderTag
from pairline.state.connection import Connection


class _NullChannel:
    def deliver(self, event: str, payload: dict) -> None:
        pass


def _waiting(*genders: str, available: bool = True) -> list[Connection]:
    return [
        Connection(
            connection_id=f"{gender}-{i}",
            channel=_NullChannel(),
            display_name=f"user{i}",
            gender=GenderTag(gender),
            available=available,
        )
        for i, gender in enumerate(genders)
    ]


def _ids(pairs: list[tuple[Connection, Connection]]) -> list[tuple[str, str]]:
    return [(a.connection_id, b.connection_id) for a, b in pairs]


def test_opposite_gender_pairs_first() -> None:
    pairs = pair_waiting(_waiting("male", "male", "female"))
    assert _ids(pairs) == [("male-0", "female-2")]


def test_opposite_pairs_positionally() -> None:
    pairs = pair_waiting(_waiting("female", "male", "female", "male"))
    assert _ids(pairs) == [("male-1", "female-0"), ("male-3", "female-2")]


def test_same_gender_fallback() -> None:
    pairs = pair_waiting(_waiting("male", "male"))
    assert _ids(pairs) == [("male-0", "male-1")]


def test_odd_bucket_leaves_singleton() -> None:
    pairs = pair_waiting(_waiting("other", "other", "other"))
    assert _ids(pairs) == [("other-0", "other-1")]


def test_leftover_males_pair_after_opposite_round() -> None:
    pairs = pair_waiting(_waiting("male", "male", "male", "female"))
    assert _ids(pairs) == [("male-0", "female-3"), ("male-1", "male-2")]


def test_every_bucket_falls_back() -> None:
    pairs = pair_waiting(_waiting("female", "other", "female", "other", "male"))
    assert _ids(pairs) == [("male-4", "female-0"), ("other-1", "other-3")]


def test_unavailable_connections_are_ignored() -> None:
    waiting = _waiting("male", "female")
    waiting[1].available = False
    assert pair_waiting(waiting) == []


def test_missing_gender_counts_as_other() -> None:
    waiting = _waiting("other", "other")
    waiting[0].gender = None
    assert _ids(pair_waiting(waiting)) == [("other-0", "other-1")]


@pytest.mark.parametrize("count", [0, 1, 2, 5, 8])
def test_no_connection_matched_twice(count: int) -> None:
    genders = ["male", "female", "other"] * count
    pairs = pair_waiting(_waiting(*genders))
    ids = [cid for pair in _ids(pairs) for cid in pair]
    assert len(ids) == len(set(ids))
