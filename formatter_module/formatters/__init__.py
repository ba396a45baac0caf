"""
Log formatters module

Provides the single line formatter and the helpers it is composed of.
"""

from formatter_module.formatters.base_formatter import BaseFormatter
from formatter_module.formatters.datetime_renderer import DateTimeRenderer
from formatter_module.formatters.level_symbols import LEVEL_SYMBOLS, symbol_for
from formatter_module.formatters.message import interpolate, resolve_message
from formatter_module.formatters.signature import build_signature, simplify_class_name
from formatter_module.formatters.single_line_formatter import SingleLineFormatter
from formatter_module.formatters.logging_adapter import SingleLineLoggingFormatter

__all__ = [
    "BaseFormatter",
    "DateTimeRenderer",
    "LEVEL_SYMBOLS",
    "symbol_for",
    "interpolate",
    "resolve_message",
    "build_signature",
    "simplify_class_name",
    "SingleLineFormatter",
    "SingleLineLoggingFormatter",
]
