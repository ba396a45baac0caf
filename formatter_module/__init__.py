"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Single Line Formatter - Renders structured log events as aligned
one-line text with abbreviated origins and two character level symbols
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from formatter_module.core.errors import FormatterError, InterpolationError, UnknownLevelError
from formatter_module.core.formatter_builder import FormatterBuilder
from formatter_module.core.formatter_config import DateTimeStyle, FormatterConfig
from formatter_module.core.log_event import LogEvent, ThrownInfo
from formatter_module.core.log_level import LogLevel
from formatter_module.formatters.single_line_formatter import SingleLineFormatter
from formatter_module.formatters.logging_adapter import SingleLineLoggingFormatter

# Import submodules (not all helpers by default)
from formatter_module import formatters

__all__ = [
    "DateTimeStyle",
    "FormatterBuilder",
    "FormatterConfig",
    "FormatterError",
    "InterpolationError",
    "LogEvent",
    "LogLevel",
    "SingleLineFormatter",
    "SingleLineLoggingFormatter",
    "ThrownInfo",
    "UnknownLevelError",
    "formatters",
]
