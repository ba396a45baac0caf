"""
Formatter configuration management

Date rendering, locale and line layout settings for SingleLineFormatter.
"""

from dataclasses import dataclass
from datetime import tzinfo as TzInfo
from enum import Enum
from typing import Optional, Union

from babel import Locale, UnknownLocaleError


class DateTimeStyle(Enum):
    """Locale default presets for date and time rendering."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    FULL = "full"

    @classmethod
    def from_string(cls, style_str: str) -> "DateTimeStyle":
        """
        Convert string to DateTimeStyle.

        Raises:
            ValueError: If style_str is not valid
        """
        try:
            return cls(style_str.lower())
        except ValueError:
            raise ValueError(f"Invalid date/time style: {style_str}") from None


StyleLike = Union[DateTimeStyle, str, None]


def _coerce_style(style: StyleLike) -> Optional[DateTimeStyle]:
    if style is None or isinstance(style, DateTimeStyle):
        return style
    return DateTimeStyle.from_string(style)


def _coerce_locale(value: Union[Locale, str]) -> Locale:
    if isinstance(value, Locale):
        return value
    try:
        return Locale.parse(value.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        raise ValueError(f"Invalid locale: {value!r}") from e


@dataclass(frozen=True)
class FormatterConfig:
    """
    Formatter configuration.

    Either ``date_pattern`` is set, or at least one of ``date_style`` and
    ``time_style``. A pattern takes precedence over the styles.
    """

    # Date settings
    date_style: Optional[DateTimeStyle] = DateTimeStyle.MEDIUM
    time_style: Optional[DateTimeStyle] = DateTimeStyle.MEDIUM
    date_pattern: Optional[str] = None
    locale: Union[Locale, str] = "en_US"
    tzinfo: Optional[TzInfo] = None  # None renders in the local zone

    # Layout settings
    signature_width: int = 50
    unknown_level_symbol: str = "??"
    strict_levels: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        object.__setattr__(self, "date_style", _coerce_style(self.date_style))
        object.__setattr__(self, "time_style", _coerce_style(self.time_style))
        object.__setattr__(self, "locale", _coerce_locale(self.locale))

        if self.date_pattern is not None and not self.date_pattern:
            raise ValueError("date_pattern cannot be empty")
        if self.date_pattern is None and self.date_style is None and self.time_style is None:
            raise ValueError("date_pattern or at least one of date_style/time_style is required")
        if self.signature_width <= 0:
            raise ValueError("signature_width must be positive")
        if len(self.unknown_level_symbol) != 2:
            raise ValueError("unknown_level_symbol must be exactly 2 characters")

    @property
    def uses_pattern(self) -> bool:
        """True if dates are rendered from an explicit pattern."""
        return self.date_pattern is not None

    @classmethod
    def default(cls) -> "FormatterConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def time_only(cls, locale: Union[Locale, str] = "en_US") -> "FormatterConfig":
        """Create configuration rendering only the wall clock time."""
        return cls(date_pattern="HH:mm:ss", locale=locale)

    @classmethod
    def iso(cls, locale: Union[Locale, str] = "en_US") -> "FormatterConfig":
        """Create configuration with ISO 8601 style timestamps."""
        return cls(date_pattern="yyyy-MM-dd'T'HH:mm:ss.SSS", locale=locale)

    @classmethod
    def strict(cls) -> "FormatterConfig":
        """Create configuration that rejects levels without a symbol."""
        return cls(strict_levels=True)
