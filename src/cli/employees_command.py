"""CLI command for employee sorting reports."""

from __future__ import annotations

import argparse
from typing import Any

from cli.sample_data import sample_employees
from core.constants import SIMPLE_EMPLOYEE_SORTS
from core.errors import RecordsTransformError
from core.logging_config import get_logger
from core.types import Employee
from transforms.employee_sorting import (
    sort_by_age,
    sort_by_name,
    sort_by_salary,
    sort_employees,
)

_LOGGER = get_logger(__name__)


def add_employees_command(subparsers: Any) -> None:
    """Register employees subcommand."""
    parser = subparsers.add_parser("employees", help="Sort the sample employee list")
    parser.add_argument(
        "--sort",
        choices=SIMPLE_EMPLOYEE_SORTS,
        default="name",
        help="Single field to sort by",
    )
    parser.add_argument(
        "--descending",
        action="store_true",
        help="Highest salary first (salary sort only)",
    )
    parser.add_argument(
        "--by",
        action="append",
        metavar="FIELD[:asc|desc]",
        help="Composite sort level; repeat for lower-priority levels. Overrides --sort",
    )


def run_employees_command(args: argparse.Namespace) -> int:
    """Print sorted employees as tab-separated rows."""
    if args.descending and (args.by or args.sort != "salary"):
        raise RecordsTransformError(
            "--descending only applies to --sort salary. "
            "Use FIELD:desc with --by for composite sorts."
        )
    employees = sample_employees()
    if args.by:
        ordered = sort_employees(employees, args.by)
        ordering = ",".join(args.by)
    else:
        ordered = _sort_single(employees, args.sort, args.descending)
        ordering = args.sort
    for employee in ordered:
        print(
            f"{employee.id}\t{employee.name}\t{employee.age}\t"
            f"{employee.salary:.2f}\t{employee.department or '-'}"
        )
    _LOGGER.info("employee_report_rendered", ordering=ordering, row_count=len(ordered))
    return 0


def _sort_single(employees: list[Employee], field: str, descending: bool) -> list[Employee]:
    if field == "age":
        return sort_by_age(employees)
    if field == "salary":
        return sort_by_salary(employees, descending=descending)
    return sort_by_name(employees)
