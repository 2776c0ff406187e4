"""Recordops exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each failure mode raises a specific error type for debuggability.
"""

from __future__ import annotations


class RecordsError(Exception):
    """Base exception for all recordops failures."""


class RecordsConfigError(RecordsError):
    """Raised for invalid runtime configuration."""


class RecordsTransformError(RecordsError):
    """Raised for unsupported transform arguments such as unknown sort fields."""


class InvalidRecordError(RecordsError):
    """Raised when a record lacks a field an operation needs as a key.

    Attributes:
        field_name: Name of the missing or invalid field.
        record_id: Id of the offending record when it has one.
    """

    def __init__(self, field_name: str, record_id: object = None, reason: str = "is missing") -> None:
        self.field_name = field_name
        self.record_id = record_id
        location = f" on record id={record_id}" if record_id is not None else ""
        super().__init__(f"Field '{field_name}' {reason}{location}.")


class InvalidRangeError(RecordsError):
    """Raised when a range query has its lower bound above its upper bound.

    Attributes:
        low: Requested lower bound.
        high: Requested upper bound.
    """

    def __init__(self, low: float, high: float) -> None:
        self.low = low
        self.high = high
        super().__init__(
            f"Invalid range: low={low} is greater than high={high}. "
            "Pass bounds with low <= high."
        )
