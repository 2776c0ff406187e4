"""Built-in sample records for the demo commands."""

from __future__ import annotations

from core.types import Employee, Product, Student


def sample_employees() -> list[Employee]:
    """Return the demo employee list."""
    return [
        Employee(id=1, name="Bob", age=35, salary=65000.0, department="Engineering"),
        Employee(id=2, name="Charlie", age=30, salary=60000.0, department="Sales"),
        Employee(id=3, name="Alice", age=28, salary=55000.0, department="Engineering"),
        Employee(id=4, name="Diana", age=30, salary=72000.0, department="Marketing"),
    ]


def sample_students() -> list[Student]:
    """Return the demo student list."""
    return [
        Student(id=1, name="John", marks=92.5, subject="Mathematics"),
        Student(id=2, name="Tom", marks=60.0, subject="Physics"),
        Student(id=3, name="Sarah", marks=88.0, subject="Chemistry"),
        Student(id=4, name="Mike", marks=76.5, subject="Biology"),
        Student(id=5, name="Emma", marks=75.0, subject="History"),
    ]


def sample_products() -> list[Product]:
    """Return the demo product list."""
    return [
        Product(id=1, name="Phone", category="Electronics", price=10000.0, quantity=5),
        Product(id=2, name="Laptop", category="Electronics", price=20000.0, quantity=2),
        Product(id=3, name="Chair", category="Furniture", price=5000.0, quantity=10),
        Product(id=4, name="Desk", category="Furniture", price=8000.0, quantity=3),
        Product(id=5, name="Novel", category="Books", price=500.0, quantity=40),
    ]
