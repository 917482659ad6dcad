"""Structured Logging - JSON formatter output and handler setup."""

import json
import logging

from workout_log.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "workout_log.test", logging.INFO, __file__, 1, "Workout added", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "workout_log.test"
    assert payload["message"] == "Workout added"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(workout_date="2025-05-26", rows_affected=1, unrelated="x"),
    ))
    assert payload["workout_date"] == "2025-05-26"
    assert payload["rows_affected"] == 1
    assert "unrelated" not in payload


def test_setup_logging_does_not_stack_handlers():
    previous_level = logging.root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        ours = [h for h in logging.root.handlers if h.get_name() == "workout_log"]
        assert len(ours) == 1
        assert not isinstance(ours[0].formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.setLevel(previous_level)
