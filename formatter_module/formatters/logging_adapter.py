"""
Bridge to the standard library ``logging`` module

Lets SingleLineFormatter be attached to any ``logging.Handler``.
"""

import logging
from typing import Optional

from formatter_module.core.formatter_config import FormatterConfig
from formatter_module.core.log_event import LogEvent
from formatter_module.core.log_level import LogLevel
from formatter_module.formatters.single_line_formatter import SingleLineFormatter


class SingleLineLoggingFormatter(logging.Formatter):
    """
    ``logging.Formatter`` producing SingleLineFormatter output.

    The logger name stands in for the class name and ``funcName`` for the
    method name. The trailing newline is dropped because handlers append
    their own terminator.

    Example:
        handler = logging.StreamHandler()
        handler.setFormatter(SingleLineLoggingFormatter(config=FormatterConfig.time_only()))
        logging.getLogger("com.example.service").addHandler(handler)
    """

    def __init__(
        self,
        formatter: Optional[SingleLineFormatter] = None,
        config: Optional[FormatterConfig] = None
    ):
        super().__init__()
        self.line_formatter = formatter or SingleLineFormatter(config)

    def to_event(self, record: logging.LogRecord) -> LogEvent:
        """
        Convert a stdlib record into a LogEvent.

        The stdlib %-style arguments are applied here, so the event carries
        no parameters.
        """
        thrown = record.exc_info[1] if record.exc_info else None
        return LogEvent(
            level=LogLevel.from_python_level(record.levelno),
            message=record.getMessage(),
            timestamp_millis=int(record.created * 1000),
            source_class_name=record.name,
            source_method_name=record.funcName,
            thrown=thrown,
        )

    def format(self, record: logging.LogRecord) -> str:
        line = self.line_formatter.format(self.to_event(record))[:-1]
        if record.stack_info:
            line += "\n" + self.formatStack(record.stack_info)
        return line
