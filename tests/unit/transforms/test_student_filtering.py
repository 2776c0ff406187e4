"""Unit tests for student threshold filtering."""

from __future__ import annotations

import pytest

from core.errors import InvalidRecordError
from core.types import Student
from transforms.student_filtering import filter_and_sort, get_student_names


def _students() -> list[Student]:
    return [
        Student(id=1, name="John", marks=92.5),
        Student(id=2, name="Tom", marks=60.0),
        Student(id=3, name="Sarah", marks=88.0),
        Student(id=4, name="Mike", marks=76.5),
    ]


def test_filter_and_sort_keeps_students_above_threshold() -> None:
    """Students above 75 should be returned best first."""
    selected = filter_and_sort(_students(), 75)

    assert [(student.name, student.marks) for student in selected] == [
        ("John", 92.5),
        ("Sarah", 88.0),
        ("Mike", 76.5),
    ]


def test_filter_and_sort_uses_default_threshold() -> None:
    """Default threshold should be 75."""
    assert filter_and_sort(_students()) == filter_and_sort(_students(), 75)


def test_filter_and_sort_excludes_marks_equal_to_threshold() -> None:
    """Threshold comparison is strict."""
    students = [Student(id=1, name="Edge", marks=75.0), Student(id=2, name="Over", marks=75.5)]

    assert [student.name for student in filter_and_sort(students, 75)] == ["Over"]


def test_filter_and_sort_keeps_input_order_for_equal_marks() -> None:
    """Equal marks should keep input order."""
    students = [
        Student(id=1, name="A", marks=80.0),
        Student(id=2, name="B", marks=90.0),
        Student(id=3, name="C", marks=80.0),
    ]

    assert [student.id for student in filter_and_sort(students, 50)] == [2, 1, 3]


def test_filter_and_sort_returns_empty_when_nobody_qualifies() -> None:
    """No qualifying student is a normal empty result."""
    assert filter_and_sort(_students(), 99) == []


def test_get_student_names_projects_names_in_order() -> None:
    """Names should follow filter_and_sort order."""
    assert get_student_names(_students(), 75) == ["John", "Sarah", "Mike"]


def test_filter_and_sort_does_not_validate_marks_range() -> None:
    """Out-of-range marks pass through untouched."""
    students = [Student(id=1, name="Odd", marks=140.0), Student(id=2, name="Low", marks=-5.0)]

    assert [student.name for student in filter_and_sort(students, 75)] == ["Odd"]


def test_filter_and_sort_raises_for_missing_marks() -> None:
    """Missing marks should fail the whole operation."""
    students = _students() + [Student(id=5, name="Ghost", marks=None)]  # type: ignore[arg-type]

    with pytest.raises(InvalidRecordError, match="marks"):
        filter_and_sort(students, 75)


def test_filter_and_sort_does_not_mutate_input() -> None:
    """The caller's list should keep its order and contents."""
    students = _students()
    snapshot = list(students)

    filter_and_sort(students, 75)
    get_student_names(students, 75)

    assert students == snapshot
