"""
Single line formatter

Renders each log event as one aligned line:

    08:17:12 d.a.b.SomeClass.doSth()                             :: some info text
    08:17:13 d.a.b.SomeClass.foo()                               !! some severe text

Level symbols:

    ..  FINEST
    .-  FINER
    --  FINE
    ::  INFO
    !?  WARNING
    !!  SEVERE

Levels without a symbol render as ``??`` unless strict level checking is
enabled, in which case UnknownLevelError is raised.
"""

from typing import Optional, Union

from babel import Locale

from formatter_module.core.formatter_config import FormatterConfig, StyleLike
from formatter_module.core.log_event import LogEvent
from formatter_module.formatters.base_formatter import BaseFormatter
from formatter_module.formatters.datetime_renderer import DateTimeRenderer
from formatter_module.formatters.level_symbols import symbol_for
from formatter_module.formatters.message import resolve_message
from formatter_module.formatters.signature import build_signature


class SingleLineFormatter(BaseFormatter):
    """
    Format log events as a single line with abbreviated origin and level.

    Instances hold only immutable configuration and may be shared across
    threads.
    """

    def __init__(self, config: Optional[FormatterConfig] = None):
        """
        Initialize single line formatter.

        Args:
            config: Formatter configuration (default: FormatterConfig.default())

        Example:
            # Locale default medium date and time
            formatter = SingleLineFormatter()

            # Wall clock time only
            formatter = SingleLineFormatter(FormatterConfig.time_only())

            # German short styles
            formatter = SingleLineFormatter.with_styles("short", "short", "de_DE")
        """
        self.config = config or FormatterConfig.default()
        self.date_renderer = DateTimeRenderer(self.config)

    @classmethod
    def with_styles(
        cls,
        date_style: StyleLike,
        time_style: StyleLike,
        locale: Union[Locale, str]
    ) -> "SingleLineFormatter":
        """Create a formatter using locale default date and time styles."""
        return cls(FormatterConfig(date_style=date_style, time_style=time_style, locale=locale))

    @classmethod
    def with_pattern(cls, date_pattern: str, locale: Union[Locale, str]) -> "SingleLineFormatter":
        """Create a formatter using an explicit date pattern such as ``HH:mm:ss``."""
        return cls(FormatterConfig(date_pattern=date_pattern, locale=locale))

    @property
    def locale(self) -> Locale:
        return self.config.locale

    def format(self, event: LogEvent) -> str:
        """
        Format log event as a single line.

        Args:
            event: Log event to format

        Returns:
            Newline terminated line; multi-line when a stack trace is attached

        Raises:
            InterpolationError: If the message template cannot be filled
            UnknownLevelError: If strict levels are on and the level has no symbol
        """
        signature = build_signature(event.source_class_name, event.source_method_name)
        message = resolve_message(event, self.locale)
        symbol = symbol_for(
            event.level,
            placeholder=self.config.unknown_level_symbol,
            strict=self.config.strict_levels
        )
        timestamp = self.date_renderer.render(event.timestamp_millis)
        width = self.config.signature_width
        return f"{timestamp} {signature:<{width}}  {symbol} {message}\n"

    def __repr__(self) -> str:
        """String representation."""
        return f"SingleLineFormatter({self.date_renderer!r})"
