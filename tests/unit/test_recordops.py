"""Unit tests for the public recordops import surface."""

from __future__ import annotations

import recordops
from recordops import Employee, Product, Student


def test_public_surface_runs_each_pipeline() -> None:
    """Every pipeline should be reachable from the top-level module."""
    employees = [
        Employee(id=1, name="Bob", age=35, salary=65000.0),
        Employee(id=2, name="Charlie", age=30, salary=60000.0),
        Employee(id=3, name="Alice", age=28, salary=55000.0),
    ]
    students = [
        Student(id=1, name="John", marks=92.5),
        Student(id=2, name="Tom", marks=60.0),
    ]
    products = [
        Product(id=1, name="Phone", category="Electronics", price=10000.0),
        Product(id=2, name="Laptop", category="Electronics", price=20000.0),
        Product(id=3, name="Chair", category="Furniture", price=5000.0),
    ]

    assert [employee.id for employee in recordops.sort_by_name(employees)] == [3, 1, 2]
    assert recordops.get_student_names(students) == ["John"]
    assert recordops.average_price_by_category(products) == {
        "Electronics": 15000.0,
        "Furniture": 5000.0,
    }


def test_public_surface_exports_are_importable() -> None:
    """Every name listed in __all__ should resolve."""
    missing = [name for name in recordops.__all__ if not hasattr(recordops, name)]

    assert missing == []
