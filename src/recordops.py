"""Public SDK surface for recordops.

This module provides a stable import path for library users.
It re-exports the record types, errors, and pipeline operations.
"""

from __future__ import annotations

from core.errors import (
    InvalidRangeError,
    InvalidRecordError,
    RecordsConfigError,
    RecordsError,
    RecordsTransformError,
)
from core.types import Employee, Product, SortKey, Student
from transforms.employee_sorting import sort_by_age, sort_by_name, sort_by_salary, sort_employees
from transforms.grouping import group_and_reduce, group_by
from transforms.ordering import sort_by_keys
from transforms.product_aggregation import (
    average_price_by_category,
    count_by_category,
    find_max_priced_product,
    find_products_in_price_range,
    group_by_category,
    inventory_value_by_category,
    max_priced_by_category,
    total_inventory_value,
)
from transforms.student_filtering import filter_and_sort, get_student_names

__all__ = [
    "Employee",
    "InvalidRangeError",
    "InvalidRecordError",
    "Product",
    "RecordsConfigError",
    "RecordsError",
    "RecordsTransformError",
    "SortKey",
    "Student",
    "average_price_by_category",
    "count_by_category",
    "filter_and_sort",
    "find_max_priced_product",
    "find_products_in_price_range",
    "get_student_names",
    "group_and_reduce",
    "group_by",
    "group_by_category",
    "inventory_value_by_category",
    "max_priced_by_category",
    "sort_by_age",
    "sort_by_keys",
    "sort_by_name",
    "sort_by_salary",
    "sort_employees",
    "total_inventory_value",
]
