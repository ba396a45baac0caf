"""
Base formatter interface

A formatter renders one LogEvent into the text a logging pipeline writes.
"""

from abc import ABC, abstractmethod
from formatter_module.core.log_event import LogEvent


class BaseFormatter(ABC):
    """
    Abstract base class for event formatters.

    Implementations must be pure: the same event and configuration always
    render to the same text, and nothing is written anywhere.
    """

    @abstractmethod
    def format(self, event: LogEvent) -> str:
        """
        Render a log event.

        Args:
            event: Event handed over by the logging pipeline

        Returns:
            Rendered text, newline terminated
        """

    def __call__(self, event: LogEvent) -> str:
        return self.format(event)
