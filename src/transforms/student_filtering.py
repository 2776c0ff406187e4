"""Student threshold filtering.

This module keeps students strictly above a marks threshold,
orders them by marks descending, and projects names.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import DEFAULT_MARKS_THRESHOLD
from core.record_fields import require_field
from core.types import SortKey, Student
from transforms.ordering import sort_by_keys


def filter_and_sort(
    students: Iterable[Student],
    threshold: float = DEFAULT_MARKS_THRESHOLD,
) -> list[Student]:
    """Select students with marks above threshold, best first.

    Args:
        students: Input students.
        threshold: Exclusive lower bound on marks.

    Returns:
        Students with marks > threshold sorted by marks descending;
        equal marks keep input order.

    Raises:
        InvalidRecordError: If any student has no marks.
    """
    selected = [
        student for student in students if require_field(student, "marks") > threshold
    ]
    return sort_by_keys(selected, [SortKey("marks", descending=True)])


def get_student_names(
    students: Iterable[Student],
    threshold: float = DEFAULT_MARKS_THRESHOLD,
) -> list[str]:
    """Return names of filter_and_sort results in the same order."""
    return [
        require_field(student, "name") for student in filter_and_sort(students, threshold)
    ]
