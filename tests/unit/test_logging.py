"""Unit tests for the structured logging setup."""

import json
import logging
import logging.handlers
import sys

import pytest

from skydive_logbook.infrastructure.logging import (
    CorrelationIDFilter,
    JSONFormatter,
    LoggingConfig,
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id
)
from skydive_logbook.presentation.api.middleware.logging import sanitize_headers, status_log_level


def make_record(message="Jump logged", **extra):
    record = logging.LogRecord(
        name="skydive_logbook.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=12,
        msg=message,
        args=(),
        exc_info=None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:

    def test_entry_fields(self):
        record = make_record(jump_number=7)
        CorrelationIDFilter().filter(record)

        entry = json.loads(JSONFormatter(service_name="logbook").format(record))

        assert entry["service"] == "logbook"
        assert entry["level"] == "INFO"
        assert entry["message"] == "Jump logged"
        assert entry["correlation_id"] == "unknown"
        assert entry["extra"] == {"jump_number": 7}

    def test_non_ascii_is_kept(self):
        entry = json.loads(JSONFormatter().format(make_record("Brouillard à Gap")))

        assert entry["message"] == "Brouillard à Gap"

    def test_exception_details(self):
        try:
            raise RuntimeError("provider down")
        except RuntimeError:
            record = make_record()
            record.exc_info = sys.exc_info()

        entry = json.loads(JSONFormatter().format(record))

        assert entry["exception"]["type"] == "RuntimeError"
        assert entry["exception"]["message"] == "provider down"


class TestCorrelationID:

    def test_filter_uses_current_id(self):
        set_correlation_id("req-42")
        try:
            record = make_record()
            CorrelationIDFilter().filter(record)

            assert record.correlation_id == "req-42"
            assert get_correlation_id() == "req-42"
        finally:
            clear_correlation_id()

        assert get_correlation_id() is None


class TestLoggingConfig:

    def test_unknown_level_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            LoggingConfig(log_level="LOUD")

    def test_console_only_by_default(self):
        handlers = LoggingConfig(log_level="debug").build_handlers()

        assert len(handlers) == 1
        assert handlers[0].level == logging.DEBUG
        assert isinstance(handlers[0].formatter, JSONFormatter)

    def test_file_handlers(self, tmp_path):
        config = LoggingConfig(log_dir=str(tmp_path / "logs"), enable_console=False, enable_file=True)

        handlers = config.build_handlers()
        try:
            assert [type(handler) for handler in handlers] == [logging.handlers.RotatingFileHandler] * 2
            assert [handler.level for handler in handlers] == [logging.INFO, logging.ERROR]
            assert (tmp_path / "logs").is_dir()
        finally:
            for handler in handlers:
                handler.close()


def test_sensitive_headers_are_redacted():
    headers = sanitize_headers({"Authorization": "Bearer abc", "X-Correlation-ID": "1"})

    assert headers == {"Authorization": "[REDACTED]", "X-Correlation-ID": "1"}


@pytest.mark.parametrize("status_code, level", [
    (200, logging.INFO),
    (201, logging.INFO),
    (404, logging.WARNING),
    (503, logging.ERROR),
])
def test_response_log_level(status_code, level):
    assert status_log_level(status_code) == level
