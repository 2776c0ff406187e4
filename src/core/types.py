"""Shared typed models.

This module defines the immutable record types consumed by the
employee, student, and product pipelines. Records do not validate on
construction; operations validate the fields they use as keys.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Employee record.

    Attributes:
        id: Employee identifier, assumed unique within one input list.
        name: Display name.
        age: Age in years.
        salary: Annual salary.
        department: Department name.
    """

    id: int
    name: str
    age: int
    salary: float
    department: str = ""


@dataclass(frozen=True)
class Student:
    """Student record.

    Attributes:
        id: Student identifier.
        name: Display name.
        marks: Score, expected in [0, 100] but not enforced.
        subject: Subject the marks were awarded in.
    """

    id: int
    name: str
    marks: float
    subject: str = ""


@dataclass(frozen=True)
class Product:
    """Product inventory record.

    Attributes:
        id: Product identifier.
        name: Product name.
        category: Free-form grouping key.
        price: Unit price.
        quantity: Units in stock.
    """

    id: int
    name: str
    category: str
    price: float
    quantity: int = 0


@dataclass(frozen=True)
class SortKey:
    """One level of a composite sort.

    Attributes:
        field: Record attribute to compare.
        descending: Reverse this level's order when true.
    """

    field: str
    descending: bool = False
