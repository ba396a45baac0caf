"""Tests for log events and levels"""

import logging
import time

import pytest

from formatter_module import LogEvent, LogLevel, ThrownInfo


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.FINEST < LogLevel.FINER
        assert LogLevel.FINER < LogLevel.FINE
        assert LogLevel.FINE < LogLevel.CONFIG
        assert LogLevel.CONFIG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.SEVERE

    def test_from_string(self):
        assert LogLevel.from_string("SEVERE") == LogLevel.SEVERE
        assert LogLevel.from_string("finer") == LogLevel.FINER
        with pytest.raises(ValueError):
            LogLevel.from_string("DEBUG")

    @pytest.mark.parametrize("levelno,expected", [
        (5, LogLevel.FINEST),
        (logging.DEBUG, LogLevel.FINE),
        (logging.INFO, LogLevel.INFO),
        (logging.WARNING, LogLevel.WARNING),
        (logging.ERROR, LogLevel.SEVERE),
        (logging.CRITICAL, LogLevel.SEVERE),
    ])
    def test_from_python_level(self, levelno, expected):
        assert LogLevel.from_python_level(levelno) == expected

    def test_str(self):
        assert str(LogLevel.WARNING) == "WARNING"


class TestLogEvent:
    """Test log event structure."""

    def test_create_event(self):
        before = int(time.time() * 1000)
        event = LogEvent(level=LogLevel.INFO, message="Test message")
        assert event.level == LogLevel.INFO
        assert event.message == "Test message"
        assert event.parameters == ()
        assert event.thrown is None
        assert event.timestamp_millis >= before

    def test_level_type_checked(self):
        with pytest.raises(TypeError):
            LogEvent(level="INFO", message="Test")

    def test_parameters_normalised(self):
        assert LogEvent(level=LogLevel.INFO, parameters=[1, 2]).parameters == (1, 2)
        assert LogEvent(level=LogLevel.INFO, parameters=None).parameters == ()

    def test_message_coerced(self):
        assert LogEvent(level=LogLevel.INFO, message=42).message == "42"

    def test_immutable(self):
        event = LogEvent(level=LogLevel.INFO, message="Test")
        with pytest.raises(AttributeError):
            event.message = "changed"

    def test_timestamp(self):
        event = LogEvent(level=LogLevel.INFO, timestamp_millis=1457943432123)
        assert event.timestamp.year == 2016
        assert event.timestamp.microsecond == 123000

    def test_to_dict(self):
        event = LogEvent(
            level=LogLevel.WARNING,
            message="Value is {0}",
            timestamp_millis=1000,
            source_class_name="com.example.Foo",
            source_method_name="bar",
            parameters=(42,),
            thrown=ValueError("bad"),
        )
        data = event.to_dict()
        assert data["level"] == "WARNING"
        assert data["parameters"] == [42]
        assert data["thrown"]["type_name"] == "ValueError"
        assert data["thrown"]["message"] == "bad"

        restored = LogEvent.from_dict(data)
        assert restored.source_class_name == "com.example.Foo"
        assert restored.parameters == (42,)
        assert isinstance(restored.thrown, ThrownInfo)
        assert restored.thrown.render() == "ValueError: bad\n"


class TestThrownInfo:
    """Test captured error values."""

    def test_from_raised_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            info = ThrownInfo.from_exception(e)
        assert info.type_name == "RuntimeError"
        assert info.message == "boom"
        assert info.stack_trace.startswith("Traceback")
        assert info.render() == info.stack_trace
