"""
Locale aware timestamp rendering

Babel's formatting functions keep no state between calls, so one renderer
can be shared by any number of threads.
"""

from datetime import datetime

from babel.dates import format_date, format_datetime, format_time

from formatter_module.core.formatter_config import FormatterConfig


class DateTimeRenderer:
    """Render epoch milliseconds with the date settings of a FormatterConfig."""

    def __init__(self, config: FormatterConfig):
        self.locale = config.locale
        self.tzinfo = config.tzinfo
        self.date_pattern = config.date_pattern
        self.date_style = config.date_style
        self.time_style = config.time_style

    def to_datetime(self, timestamp_millis: int) -> datetime:
        """Convert epoch milliseconds to an aware datetime in the configured zone."""
        seconds = timestamp_millis / 1000
        if self.tzinfo is None:
            return datetime.fromtimestamp(seconds).astimezone()
        return datetime.fromtimestamp(seconds, tz=self.tzinfo)

    def render(self, timestamp_millis: int) -> str:
        """
        Render a timestamp.

        Args:
            timestamp_millis: Milliseconds since the epoch

        Returns:
            Rendered date and/or time
        """
        moment = self.to_datetime(timestamp_millis)

        if self.date_pattern is not None:
            return format_datetime(moment, self.date_pattern, locale=self.locale)

        if self.date_style is None:
            return format_time(moment, self.time_style.value, locale=self.locale)
        if self.time_style is None:
            return format_date(moment, self.date_style.value, locale=self.locale)

        # {1} is the date half, {0} the time half
        combined = str(self.locale.datetime_formats[self.date_style.value])
        return (combined.replace("'", "")
                .replace("{0}", format_time(moment, self.time_style.value, locale=self.locale))
                .replace("{1}", format_date(moment, self.date_style.value, locale=self.locale)))

    def __repr__(self) -> str:
        """String representation."""
        if self.date_pattern is not None:
            return f"DateTimeRenderer(pattern='{self.date_pattern}', locale={self.locale})"
        return (f"DateTimeRenderer(date_style={self.date_style}, "
                f"time_style={self.time_style}, locale={self.locale})")
