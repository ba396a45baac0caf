"""
Core module for formatter system

This module contains the fundamental classes:
- LogEvent: Log event data structure
- LogLevel: Log level enumeration
- FormatterConfig: Configuration management
- FormatterBuilder: Builder pattern for formatter construction
- FormatterError and subclasses
"""

from formatter_module.core.errors import FormatterError, InterpolationError, UnknownLevelError
from formatter_module.core.log_event import LogEvent, ThrownInfo
from formatter_module.core.log_level import LogLevel
from formatter_module.core.formatter_config import DateTimeStyle, FormatterConfig
from formatter_module.core.formatter_builder import FormatterBuilder

__all__ = [
    "LogEvent",
    "ThrownInfo",
    "LogLevel",
    "DateTimeStyle",
    "FormatterConfig",
    "FormatterBuilder",
    "FormatterError",
    "InterpolationError",
    "UnknownLevelError",
]
