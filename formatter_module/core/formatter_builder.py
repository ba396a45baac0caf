"""Formatter builder pattern"""

from datetime import tzinfo as TzInfo
from typing import Any, Dict, Union

from babel import Locale

from formatter_module.core.formatter_config import FormatterConfig, StyleLike


class FormatterBuilder:
    """Builder pattern for SingleLineFormatter construction."""

    def __init__(self):
        self._options: Dict[str, Any] = {}

    def with_locale(self, locale: Union[Locale, str]) -> "FormatterBuilder":
        """Set locale for dates and numbers."""
        self._options["locale"] = locale
        return self

    def with_styles(self, date_style: StyleLike, time_style: StyleLike) -> "FormatterBuilder":
        """
        Use locale default date/time styles.

        Pass None for either style to render only the other half. Clears a
        previously set date pattern.
        """
        self._options["date_style"] = date_style
        self._options["time_style"] = time_style
        self._options.pop("date_pattern", None)
        return self

    def with_pattern(self, date_pattern: str) -> "FormatterBuilder":
        """Use an explicit date pattern such as ``yyyy-MM-dd HH:mm:ss``."""
        self._options["date_pattern"] = date_pattern
        return self

    def with_timezone(self, tzinfo: TzInfo) -> "FormatterBuilder":
        """Render timestamps in the given zone instead of the local one."""
        self._options["tzinfo"] = tzinfo
        return self

    def with_signature_width(self, width: int) -> "FormatterBuilder":
        """Set minimum width of the signature column."""
        self._options["signature_width"] = width
        return self

    def with_unknown_level_symbol(self, symbol: str) -> "FormatterBuilder":
        """Set symbol rendered for levels without one."""
        self._options["unknown_level_symbol"] = symbol
        return self

    def with_strict_levels(self, enabled: bool = True) -> "FormatterBuilder":
        """Raise UnknownLevelError for levels without a symbol."""
        self._options["strict_levels"] = enabled
        return self

    def build_config(self) -> FormatterConfig:
        """
        Build the configuration only.

        Raises:
            ValueError: If the collected options are invalid
        """
        return FormatterConfig(**self._options)

    def build(self):
        """
        Build the formatter.

        Returns:
            Configured SingleLineFormatter instance
        """
        from formatter_module.formatters.single_line_formatter import SingleLineFormatter

        return SingleLineFormatter(self.build_config())
