"""Tests for logging configuration and formatters."""

import io
import json
import logging
import sys

import pytest

from jobboard.logging import ComponentLoggerAdapter, get_logger
from jobboard.logging.config import (
    SERVICE_NAME,
    ContextualFilter,
    JSONFormatter,
    KeyValueFormatter,
    configure_logging,
)
from jobboard.logging.context import log_context


@pytest.fixture
def logger():
    """Create a test logger."""
    test_logger = logging.getLogger("test_logger")
    test_logger.setLevel(logging.DEBUG)
    test_logger.handlers.clear()

    yield test_logger

    test_logger.handlers.clear()


@pytest.fixture
def restore_root_logger():
    """Restore root handlers and level after configure_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield root

    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_basic(logger):
    """Test JSONFormatter produces valid JSON with mandatory fields."""
    record = logger.makeRecord("test", logging.INFO, "test.py", 1, "Test message", (), None)

    log_obj = json.loads(JSONFormatter().format(record))

    assert log_obj["level"] == "INFO"
    assert log_obj["logger"] == "test"
    assert log_obj["message"] == "Test message"
    assert log_obj["timestamp"].endswith("Z")


def test_json_formatter_with_extra_fields(logger):
    """Test JSONFormatter includes extra fields and keeps non-ASCII text."""
    record = logger.makeRecord(
        "test",
        logging.INFO,
        "test.py",
        1,
        "Ranked jobs",
        (),
        None,
        extra={"event": "matching.rank.completed", "jobs_total": 3, "region": "Farg'ona", "lang": "ру"},
    )

    output = JSONFormatter().format(record)
    log_obj = json.loads(output)

    assert log_obj["event"] == "matching.rank.completed"
    assert log_obj["jobs_total"] == 3
    assert log_obj["region"] == "Farg'ona"
    assert "ру" in output


def test_json_formatter_exception(logger):
    """Test that exception info is rendered."""
    try:
        raise ValueError("bad record")
    except ValueError:
        record = logger.makeRecord(
            "test", logging.ERROR, "test.py", 1, "Failed", (), sys.exc_info()
        )

    log_obj = json.loads(JSONFormatter().format(record))

    assert "ValueError: bad record" in log_obj["exc_info"]


def test_contextual_filter_adds_static_fields(logger):
    """Test ContextualFilter adds service and environment fields."""
    record = logger.makeRecord("test", logging.INFO, "test.py", 1, "msg", (), None)

    ContextualFilter(service="test-service", environment="test").filter(record)

    assert record.service == "test-service"
    assert record.environment == "test"


def test_contextual_filter_adds_context_fields(logger):
    """Test ContextualFilter adds fields from log context."""
    with log_context(profile_id="p-1", lang="ru"):
        record = logger.makeRecord("test", logging.INFO, "test.py", 1, "msg", (), None)
        ContextualFilter().filter(record)

    assert record.profile_id == "p-1"
    assert record.lang == "ru"
    assert record.service == SERVICE_NAME


def test_explicit_extra_wins_over_context(logger):
    """Test that fields passed through extra take precedence."""
    with log_context(job_id="from-context"):
        record = logger.makeRecord(
            "test", logging.INFO, "test.py", 1, "msg", (), None, extra={"job_id": "explicit"}
        )
        ContextualFilter().filter(record)

    assert record.job_id == "explicit"


def test_key_value_formatter(logger):
    """Test human-readable output with sorted extras."""
    formatter = KeyValueFormatter("%(levelname)s %(name)s: %(message)s")
    record = logger.makeRecord(
        "test",
        logging.INFO,
        "test.py",
        1,
        "Ranked",
        (),
        None,
        extra={
            "jobs_total": 2,
            "event": "matching.rank.completed",
            "matched_factors": ["region", "salary"],
            "note": "two words",
            "flag": False,
            "missing": None,
        },
    )
    ContextualFilter().filter(record)

    output = formatter.format(record)

    assert output.startswith("INFO test: Ranked ")
    assert 'event=matching.rank.completed flag=false jobs_total=2 matched_factors=region,salary' in output
    assert "missing=null" in output
    assert 'note="two words"' in output
    assert "service=" not in output


def test_key_value_formatter_without_extras(logger):
    """Test that records without extras render only the base line."""
    formatter = KeyValueFormatter("%(message)s")
    record = logger.makeRecord("test", logging.INFO, "test.py", 1, "plain", (), None)

    assert formatter.format(record) == "plain"


@pytest.mark.parametrize(
    "value,expected",
    [
        (["region", "salary"], "region,salary"),
        ([], "[]"),
        ("Ranked 3 jobs", '"Ranked 3 jobs"'),
        ("a=b", '"a=b"'),
        ("plain", "plain"),
        (True, "true"),
        (None, "null"),
        (15, "15"),
    ],
)
def test_key_value_format_value(value, expected):
    """Test rendering of single values in key-value output."""
    assert KeyValueFormatter._format_value(value) == expected


def test_configure_logging_json(restore_root_logger):
    """Test that configure_logging installs a JSON handler on the root logger."""
    stream = io.StringIO()

    configure_logging(level="info", format_type="json", environment="test", stream=stream)
    logging.getLogger("jobboard.test").info("hello", extra={"event": "test.event"})

    lines = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert lines[-1]["message"] == "hello"
    assert lines[-1]["event"] == "test.event"
    assert lines[-1]["environment"] == "test"
    assert restore_root_logger.level == logging.INFO
    assert len(restore_root_logger.handlers) == 1


def test_configure_logging_debug_reports_itself(restore_root_logger):
    """Test that DEBUG level records the configuration event."""
    stream = io.StringIO()

    configure_logging(level="DEBUG", format_type="key-value", stream=stream)

    assert "event=logging.configured" in stream.getvalue()


@pytest.mark.parametrize(
    "level,format_type", [("LOUD", "json"), ("INFO", "xml")]
)
def test_configure_logging_rejects_invalid(level, format_type, restore_root_logger):
    """Test that invalid level or format raises ValueError."""
    with pytest.raises(ValueError):
        configure_logging(level=level, format_type=format_type)


def test_get_logger_with_component():
    """Test that component loggers tag records and keep call extras."""
    adapter = get_logger("jobboard.test", component="matching")
    assert isinstance(adapter, ComponentLoggerAdapter)

    msg, kwargs = adapter.process("msg", {"extra": {"event": "x"}})

    assert kwargs["extra"] == {"component": "matching", "event": "x"}


def test_get_logger_without_component():
    """Test that plain loggers are returned when no component is given."""
    assert isinstance(get_logger("jobboard.test"), logging.Logger)
