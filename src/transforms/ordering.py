"""Stable multi-key ordering.

This module sorts records by an ordered sequence of sort keys.
Each level can be ascending or descending and equal records keep
their input order.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Iterable, Sequence, TypeVar

from core.errors import RecordsTransformError
from core.record_fields import require_field
from core.types import SortKey

RecordT = TypeVar("RecordT")


def sort_by_keys(
    records: Iterable[RecordT],
    keys: Sequence[SortKey],
    allowed_fields: Sequence[str] | None = None,
) -> list[RecordT]:
    """Sort records by keys in priority order.

    Args:
        records: Input records, left untouched.
        keys: Sort levels, highest priority first.
        allowed_fields: Optional whitelist of sortable field names. When
            omitted, keys must name fields of the record type.

    Returns:
        New ordered list.

    Raises:
        RecordsTransformError: If a key names an unsupported field.
        InvalidRecordError: If any record lacks a key value.
    """
    ordered = list(records)
    if allowed_fields is None and ordered:
        allowed_fields = _record_field_names(ordered[0], keys)
    if allowed_fields is not None:
        _check_sort_fields(keys, allowed_fields)
    key_values = [_read_key_values(record, keys) for record in ordered]
    positions = list(range(len(ordered)))
    # Least significant key first; list.sort is stable in both directions.
    for level in reversed(range(len(keys))):
        positions.sort(key=lambda index: key_values[index][level], reverse=keys[level].descending)
    return [ordered[index] for index in positions]


def parse_sort_key(raw_key: SortKey | tuple[str, bool | str] | str) -> SortKey:
    """Coerce a sort key description into a SortKey.

    Accepts a SortKey, a (field, descending) tuple whose direction is a bool
    or an asc/desc word, or a "field[:asc|desc]"
    string.
    """
    if isinstance(raw_key, SortKey):
        return raw_key
    if isinstance(raw_key, tuple) and len(raw_key) == 2:
        return _parse_sort_key_tuple(raw_key)
    if isinstance(raw_key, str):
        return _parse_sort_key_text(raw_key)
    raise RecordsTransformError(f"Malformed sort key: {raw_key!r}.")


def _parse_sort_key_tuple(raw_key: tuple[object, object]) -> SortKey:
    field_name, direction = raw_key
    if not isinstance(field_name, str) or not field_name:
        raise RecordsTransformError(f"Malformed sort key: {raw_key!r}.")
    if isinstance(direction, bool):
        return SortKey(field=field_name, descending=direction)
    if isinstance(direction, str):
        return _parse_sort_key_text(f"{field_name}:{direction}")
    raise RecordsTransformError(
        f"Malformed sort key {raw_key!r}. Direction must be a bool, 'asc' or 'desc'."
    )


def _parse_sort_key_text(raw_key: str) -> SortKey:
    field_name, _, direction = raw_key.strip().partition(":")
    direction = direction.strip().lower() or "asc"
    if not field_name or direction not in ("asc", "desc"):
        raise RecordsTransformError(
            f"Malformed sort key '{raw_key}'. Use FIELD, FIELD:asc or FIELD:desc."
        )
    return SortKey(field=field_name.strip(), descending=direction == "desc")


def _read_key_values(record: object, keys: Sequence[SortKey]) -> tuple[object, ...]:
    return tuple(require_field(record, key.field) for key in keys)


def _record_field_names(record: object, keys: Sequence[SortKey]) -> tuple[str, ...]:
    if is_dataclass(record):
        return tuple(field.name for field in fields(record))
    return tuple(key.field for key in keys if hasattr(record, key.field))


def _check_sort_fields(keys: Sequence[SortKey], allowed_fields: Sequence[str]) -> None:
    for key in keys:
        if key.field not in allowed_fields:
            supported = ", ".join(allowed_fields)
            raise RecordsTransformError(
                f"Unsupported sort field '{key.field}'. Choose one of: {supported}."
            )
