"""Tests for the stdlib logging bridge"""

import io
import logging
import sys
from datetime import timezone

import pytest

from formatter_module import (
    FormatterConfig,
    InterpolationError,
    LogLevel,
    SingleLineFormatter,
    SingleLineLoggingFormatter,
)


@pytest.fixture
def logging_formatter():
    config = FormatterConfig(date_pattern="HH:mm:ss", tzinfo=timezone.utc)
    return SingleLineLoggingFormatter(config=config)


def make_record(**kwargs) -> logging.LogRecord:
    defaults = dict(
        name="com.example.service.Worker",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="processed %d items",
        args=(3,),
        exc_info=None,
        func="run",
    )
    defaults.update(kwargs)
    record = logging.LogRecord(**defaults)
    record.created = 1457943432.5
    return record


class TestSingleLineLoggingFormatter:
    """Test conversion of stdlib records."""

    def test_to_event(self, logging_formatter):
        event = logging_formatter.to_event(make_record(level=logging.WARNING))
        assert event.level == LogLevel.WARNING
        assert event.message == "processed 3 items"
        assert event.timestamp_millis == 1457943432500
        assert event.source_class_name == "com.example.service.Worker"
        assert event.source_method_name == "run"
        assert event.parameters == ()

    def test_format(self, logging_formatter):
        line = logging_formatter.format(make_record())
        assert line == "08:17:12 " + "c.e.s.Worker.run()".ljust(50) + "  :: processed 3 items"

    def test_braces_left_alone(self, logging_formatter):
        line = logging_formatter.format(make_record(msg="payload {0}", args=()))
        assert line.endswith(":: payload {0}")

    def test_exception(self, logging_formatter):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record(level=logging.ERROR, msg="", args=(), exc_info=sys.exc_info())

        line = logging_formatter.format(record)
        head, trace = line.split("\n", 1)
        assert head.endswith("  !! boom")
        assert trace.endswith("ValueError: boom")

    def test_stack_info_appended(self, logging_formatter):
        record = make_record(msg="checkpoint", args=())
        record.stack_info = 'Stack (most recent call last):\n  File "worker.py", line 3, in run'
        line = logging_formatter.format(record)
        head, stack = line.split("\n", 1)
        assert head.endswith(":: checkpoint")
        assert stack == record.stack_info

    def test_stack_info_from_logger(self, logging_formatter):
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging_formatter)
        logger = logging.getLogger("org.acme.Audit")
        logger.propagate = False
        logger.addHandler(handler)
        try:
            logger.warning("tracing", stack_info=True)
        finally:
            logger.removeHandler(handler)

        output = stream.getvalue()
        assert "  !? tracing\nStack (most recent call last):" in output
        assert "test_stack_info_from_logger" in output

    def test_shared_line_formatter(self):
        line_formatter = SingleLineFormatter(FormatterConfig.time_only())
        assert SingleLineLoggingFormatter(line_formatter).line_formatter is line_formatter

    def test_with_handler(self, logging_formatter):
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging_formatter)
        logger = logging.getLogger("org.acme.Billing")
        logger.propagate = False
        logger.addHandler(handler)
        try:
            logger.warning("invoice %s late", "A-17")
        finally:
            logger.removeHandler(handler)

        output = stream.getvalue()
        assert output.count("\n") == 1
        assert "o.a.Billing.test_with_handler()" in output
        assert output.endswith("  !? invoice A-17 late\n")


class TestInterpolationErrorType:
    """Test error hierarchy used by handlers."""

    def test_is_value_error(self):
        assert issubclass(InterpolationError, ValueError)
