"""Employee sorting transforms.

This module produces reordered copies of employee lists by name,
age, salary, or any composite of supported fields.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from core.constants import EMPLOYEE_SORT_FIELDS
from core.types import Employee, SortKey
from transforms.ordering import parse_sort_key, sort_by_keys


def sort_by_name(employees: Iterable[Employee]) -> list[Employee]:
    """Sort employees by name in code-point order, ascending."""
    return sort_by_keys(employees, [SortKey("name")])


def sort_by_age(employees: Iterable[Employee]) -> list[Employee]:
    """Sort employees by age, ascending."""
    return sort_by_keys(employees, [SortKey("age")])


def sort_by_salary(employees: Iterable[Employee], descending: bool = False) -> list[Employee]:
    """Sort employees by salary.

    Args:
        employees: Input employees.
        descending: Highest salary first when true.

    Returns:
        New ordered list; equal salaries keep input order.
    """
    return sort_by_keys(employees, [SortKey("salary", descending=descending)])


def sort_employees(
    employees: Iterable[Employee],
    keys: Sequence[SortKey | tuple[str, bool | str] | str],
) -> list[Employee]:
    """Sort employees by several fields in priority order.

    Args:
        employees: Input employees.
        keys: SortKey values, (field, bool or "asc"/"desc") tuples, or
            "field[:asc|desc]" strings. The first key has highest priority.

    Returns:
        New ordered list.

    Raises:
        RecordsTransformError: If a key is malformed or names an unknown field.
        InvalidRecordError: If an employee lacks a key value.
    """
    sort_keys = [parse_sort_key(key) for key in keys]
    return sort_by_keys(employees, sort_keys, allowed_fields=EMPLOYEE_SORT_FIELDS)
