"""Required field access for records.

Every operation that keys on a record field reads it through here so
that a missing value fails the whole operation with InvalidRecordError.
"""

from __future__ import annotations

from typing import Any

from core.errors import InvalidRecordError

_MISSING = object()


def require_field(record: object, field_name: str) -> Any:
    """Return a record field value, failing when it is absent.

    Args:
        record: Record instance to read.
        field_name: Attribute name.

    Returns:
        The field value.

    Raises:
        InvalidRecordError: If the attribute is absent or None.
    """
    value = getattr(record, field_name, _MISSING)
    if value is _MISSING or value is None:
        raise InvalidRecordError(field_name, record_id=getattr(record, "id", None))
    return value


def require_non_negative(record: object, field_name: str) -> Any:
    """Return a numeric field value, failing when absent or negative."""
    value = require_field(record, field_name)
    if value < 0:
        raise InvalidRecordError(
            field_name,
            record_id=getattr(record, "id", None),
            reason=f"must be non-negative, got {value}",
        )
    return value
