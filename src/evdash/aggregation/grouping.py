"""Generic group-by used by every aggregator."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, TypeVar

from evdash.models.domain import Record

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def group_by(
    records: Iterable[Record],
    key_fn: Callable[[Record], K | None],
    value_fn: Callable[[Record], V | None],
) -> dict[K, list[V]]:
    """Group derived values by a derived key.

    Records whose key is None or "" are skipped entirely. Records whose
    value is None still register their key, so a key may end up holding
    an empty list. Keys keep first-seen order.

    Args:
        records: Records to group.
        key_fn: Derives the grouping key from a record.
        value_fn: Derives the value collected under that key.

    Returns:
        Mapping of key to the list of non-None values, in input order.
    """
    groups: dict[K, list[V]] = {}
    for record in records:
        key = key_fn(record)
        if key is None or key == "":
            continue
        bucket = groups.setdefault(key, [])
        value = value_fn(record)
        if value is not None:
            bucket.append(value)
    return groups
