"""Unit tests for structured logging configuration."""

from __future__ import annotations

import json

import pytest

from core.logging_config import configure_logging, get_logger


def test_configure_logging_writes_json_events_to_stderr(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Events should render as JSON lines on stderr."""
    configure_logging("INFO")

    get_logger("tests.logging").info("report_rendered", row_count=3)
    captured = capsys.readouterr()
    payload = json.loads(captured.err.strip().splitlines()[-1])

    assert payload["event"] == "report_rendered"
    assert payload["row_count"] == 3 and payload["level"] == "info"
    assert captured.out == ""


def test_configure_logging_filters_below_level(capsys: pytest.CaptureFixture[str]) -> None:
    """Events under the configured level should be dropped."""
    configure_logging("WARNING")

    get_logger("tests.logging").info("quiet_event")

    assert capsys.readouterr().err == ""
