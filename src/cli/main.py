"""Recordops CLI entry points.

This module exposes demo commands for the employee, student, and
product pipelines. It maps argparse commands onto transform calls
over the built-in sample records.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from cli.employees_command import add_employees_command, run_employees_command
from cli.products_command import add_products_command, run_products_command
from cli.students_command import add_students_command, run_students_command
from core.config import RecordsConfig
from core.constants import SUPPORTED_LOG_LEVELS
from core.errors import RecordsError
from core.logging_config import configure_logging, get_logger

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="recordops",
        description="Record transformation demos",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=SUPPORTED_LOG_LEVELS,
        help="Override RECORDS_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_employees_command(subparsers)
    add_students_command(subparsers)
    add_products_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the recordops CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = RecordsConfig.from_env()
    except RecordsError as error:
        print(f"error={error}")
        return 1
    configure_logging(args.log_level or config.log_level)
    try:
        return _dispatch(parser, config, args)
    except RecordsError as error:
        _LOGGER.error("command_failed", command=args.command, error=str(error))
        print(f"error={error}")
        return 1


def _dispatch(
    parser: argparse.ArgumentParser,
    config: RecordsConfig,
    args: argparse.Namespace,
) -> int:
    if args.command == "employees":
        return run_employees_command(args)
    if args.command == "students":
        return run_students_command(config, args)
    if args.command == "products":
        return run_products_command(args)
    parser.error(f"Unsupported command: {args.command}")
    return 2
