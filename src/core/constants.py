"""Core constants used across recordops modules.

This module centralizes defaults and supported field names.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_MARKS_THRESHOLD = 75.0
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
EMPLOYEE_SORT_FIELDS = ("id", "name", "age", "salary", "department")
SIMPLE_EMPLOYEE_SORTS = ("name", "age", "salary")
SORT_DIRECTION_ASCENDING = "asc"
SORT_DIRECTION_DESCENDING = "desc"
MARKS_THRESHOLD_ENV = "RECORDS_MARKS_THRESHOLD"
LOG_LEVEL_ENV = "RECORDS_LOG_LEVEL"
