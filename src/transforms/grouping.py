"""Group-by and group-then-reduce helpers.

Groups preserve first-seen key order and per-group input order.
"""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, TypeVar

RecordT = TypeVar("RecordT")
KeyT = TypeVar("KeyT", bound=Hashable)
ValueT = TypeVar("ValueT")


def group_by(
    records: Iterable[RecordT],
    key_fn: Callable[[RecordT], KeyT],
) -> dict[KeyT, list[RecordT]]:
    """Partition records by key.

    Args:
        records: Input records.
        key_fn: Function extracting the grouping key.

    Returns:
        Ordered mapping of key to records sharing that key.
    """
    groups: dict[KeyT, list[RecordT]] = {}
    for record in records:
        groups.setdefault(key_fn(record), []).append(record)
    return groups


def group_and_reduce(
    records: Iterable[RecordT],
    key_fn: Callable[[RecordT], KeyT],
    reducer: Callable[[list[RecordT]], ValueT],
) -> dict[KeyT, ValueT]:
    """Partition records by key and reduce every partition.

    Args:
        records: Input records.
        key_fn: Function extracting the grouping key.
        reducer: Function applied to each non-empty group.

    Returns:
        Ordered mapping of key to reduced value.
    """
    return {key: reducer(group) for key, group in group_by(records, key_fn).items()}
