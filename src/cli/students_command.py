"""CLI command for student threshold reports."""

from __future__ import annotations

import argparse
from typing import Any

from cli.sample_data import sample_students
from core.config import RecordsConfig
from core.logging_config import get_logger
from transforms.student_filtering import filter_and_sort, get_student_names

_LOGGER = get_logger(__name__)


def add_students_command(subparsers: Any) -> None:
    """Register students subcommand."""
    parser = subparsers.add_parser(
        "students",
        help="List sample students above a marks threshold",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        help="Exclusive marks threshold (defaults to RECORDS_MARKS_THRESHOLD)",
    )
    parser.add_argument("--names-only", action="store_true", help="Print names only")


def run_students_command(config: RecordsConfig, args: argparse.Namespace) -> int:
    """Print students above the threshold, best marks first."""
    threshold = config.marks_threshold if args.threshold is None else args.threshold
    students = sample_students()
    if args.names_only:
        names = get_student_names(students, threshold)
        for name in names:
            print(name)
        row_count = len(names)
    else:
        selected = filter_and_sort(students, threshold)
        for student in selected:
            print(f"{student.id}\t{student.name}\t{student.marks:.1f}\t{student.subject or '-'}")
        row_count = len(selected)
    _LOGGER.info("student_report_rendered", threshold=threshold, row_count=row_count)
    return 0
