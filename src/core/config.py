"""Runtime configuration model for recordops.

This module owns all environment variable parsing and validation.
The demo CLI consumes a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MARKS_THRESHOLD,
    LOG_LEVEL_ENV,
    MARKS_THRESHOLD_ENV,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import RecordsConfigError


@dataclass(frozen=True)
class RecordsConfig:
    """Validated runtime configuration.

    Attributes:
        marks_threshold: Default student marks threshold for reports.
        log_level: Minimum structlog level name.
    """

    marks_threshold: float
    log_level: str

    @classmethod
    def from_env(cls) -> "RecordsConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RecordsConfigError: If environment values are invalid.
        """
        threshold_value = os.getenv(MARKS_THRESHOLD_ENV, str(DEFAULT_MARKS_THRESHOLD))
        log_level_value = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
        return cls(
            marks_threshold=_parse_marks_threshold(threshold_value),
            log_level=_parse_log_level(log_level_value),
        )


def _parse_marks_threshold(raw_value: str) -> float:
    """Parse the marks threshold environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed float threshold.

    Raises:
        RecordsConfigError: If value cannot be parsed into float.
    """
    try:
        return float(raw_value)
    except ValueError as error:
        raise RecordsConfigError(
            f"Invalid {MARKS_THRESHOLD_ENV} value: "
            f"expected number, got '{raw_value}'. "
            f"Set {MARKS_THRESHOLD_ENV} to a numeric value."
        ) from error


def _parse_log_level(raw_value: str) -> str:
    """Normalize and validate a log level name."""
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        supported = ", ".join(SUPPORTED_LOG_LEVELS)
        raise RecordsConfigError(
            f"Invalid {LOG_LEVEL_ENV} value '{raw_value}'. Choose one of: {supported}."
        )
    return level
