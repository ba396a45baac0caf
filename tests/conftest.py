"""Shared fixtures for formatter tests"""

from datetime import datetime, timezone

import pytest

from formatter_module import FormatterConfig, SingleLineFormatter


def millis(*args) -> int:
    """Epoch milliseconds for a UTC wall clock time."""
    return int(datetime(*args, tzinfo=timezone.utc).timestamp() * 1000)


@pytest.fixture
def morning_millis() -> int:
    return millis(2016, 3, 14, 8, 17, 12)


@pytest.fixture
def time_formatter() -> SingleLineFormatter:
    config = FormatterConfig(date_pattern="HH:mm:ss", locale="en_US", tzinfo=timezone.utc)
    return SingleLineFormatter(config)
