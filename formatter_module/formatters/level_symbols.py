"""Two character symbols for log levels"""

from types import MappingProxyType
from typing import Mapping

from formatter_module.core.errors import UnknownLevelError
from formatter_module.core.log_level import LogLevel

DEFAULT_PLACEHOLDER = "??"

LEVEL_SYMBOLS: Mapping[LogLevel, str] = MappingProxyType({
    LogLevel.FINEST: "..",
    LogLevel.FINER: ".-",
    LogLevel.FINE: "--",
    LogLevel.INFO: "::",
    LogLevel.WARNING: "!?",
    LogLevel.SEVERE: "!!",
})


def symbol_for(
    level: LogLevel,
    placeholder: str = DEFAULT_PLACEHOLDER,
    strict: bool = False
) -> str:
    """
    Look up the symbol for a level.

    Args:
        level: Level of the event
        placeholder: Symbol used for levels without an entry
        strict: Raise instead of returning the placeholder

    Returns:
        Two character symbol

    Raises:
        UnknownLevelError: If strict and the level has no symbol
    """
    symbol = LEVEL_SYMBOLS.get(level)
    if symbol is not None:
        return symbol
    if strict:
        raise UnknownLevelError(level)
    return placeholder
