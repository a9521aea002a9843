"""Gender-bucketed pairing over the waiting connections.

Connections are split into ``male``, ``female`` and ``other`` buckets, keeping
queue order inside each bucket. Opposite-gender pairs are formed first,
position by position, up to the length of the shorter of the two buckets.
Whatever is left in each bucket is then paired with itself two at a time; a
trailing odd connection stays unmatched until the next pass.

The buckets are rebuilt on every call, so each pass is linear in the number
of waiting connections.
"""

from __future__ import annotations

from collections.abc import Iterable

from pairline.state.gender import GenderTag
from pairline.state.connection import Connection

Pair = tuple[Connection, Connection]


def _bucket_by_gender(waiting: Iterable[Connection]) -> dict[GenderTag, list[Connection]]:
    buckets: dict[GenderTag, list[Connection]] = {tag: [] for tag in GenderTag}
    for conn in waiting:
        if not conn.available:
            continue
        buckets[conn.gender or GenderTag.OTHER].append(conn)
    return buckets


def _match_opposite(males: list[Connection], females: list[Connection], matched: set[str]) -> list[Pair]:
    pairs: list[Pair] = []
    for male, female in zip(males, females):
        pairs.append((male, female))
        matched.add(male.connection_id)
        matched.add(female.connection_id)
    return pairs


def _match_same(bucket: list[Connection], matched: set[str]) -> list[Pair]:
    remaining = [conn for conn in bucket if conn.connection_id not in matched]
    pairs: list[Pair] = []
    for i in range(0, len(remaining) - 1, 2):
        first, second = remaining[i], remaining[i + 1]
        pairs.append((first, second))
        matched.add(first.connection_id)
        matched.add(second.connection_id)
    return pairs


def pair_waiting(waiting: Iterable[Connection]) -> list[Pair]:
    """Return the pairs formed from ``waiting`` in a single pass.

    Unavailable connections are ignored. No connection appears in more than
    one pair.
    """
    buckets = _bucket_by_gender(waiting)
    matched: set[str] = set()

    pairs = _match_opposite(buckets[GenderTag.MALE], buckets[GenderTag.FEMALE], matched)
    for tag in GenderTag:
        pairs.extend(_match_same(buckets[tag], matched))
    return pairs


__all__ = ["Pair", "pair_waiting"]
