"""Exceptions raised while formatting log events"""

from typing import Any, Sequence


class FormatterError(Exception):
    """Base class for all formatter errors."""


class InterpolationError(FormatterError, ValueError):
    """
    A message template could not be filled with its parameters.

    Raised for out-of-range or named placeholders, unbalanced braces and
    parameters that cannot be rendered as text.
    """

    def __init__(self, reason: str, template: str, parameters: Sequence[Any]):
        super().__init__(f"{reason} (template={template!r})")
        self.reason = reason
        self.template = template
        self.parameters = tuple(parameters)


class UnknownLevelError(FormatterError, LookupError):
    """No symbol is defined for a level and strict level checking is on."""

    def __init__(self, level):
        super().__init__(f"No symbol defined for level {level}")
        self.level = level
