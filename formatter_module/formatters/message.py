"""
Message rendering

Fills positional message templates and appends stack traces of attached
errors.
"""

import string
import traceback
from datetime import datetime
from decimal import Decimal, localcontext
from typing import Any, Sequence

from babel import Locale
from babel.dates import format_datetime
from babel.numbers import format_decimal

from formatter_module.core.errors import InterpolationError
from formatter_module.core.log_event import LogEvent, ThrownInfo


class _PositionalFormatter(string.Formatter):
    """str.format semantics restricted to plain positional fields, locale aware."""

    def __init__(self, template: str, parameters: Sequence[Any], locale: Locale):
        super().__init__()
        self.template = template
        self.parameters = parameters
        self.locale = locale

    def get_field(self, field_name, args, kwargs):
        # Auto-numbered fields arrive here already converted to digits
        if not (field_name.isascii() and field_name.isdigit()):
            raise InterpolationError(
                f"placeholder {{{field_name}}} is not a plain positional index",
                self.template, self.parameters
            )
        index = int(field_name)
        if index >= len(args):
            raise InterpolationError(
                f"placeholder {{{index}}} out of range for {len(args)} parameter(s)",
                self.template, self.parameters
            )
        return args[index], field_name

    def format_field(self, value, format_spec):
        try:
            if not format_spec:
                return self._render_default(value)
            return format(value, format_spec)
        except Exception as e:
            raise InterpolationError(
                f"cannot render parameter of type {type(value).__name__}: {e}",
                self.template, self.parameters
            ) from e

    def _render_default(self, value) -> str:
        if isinstance(value, bool):
            return str(value)
        if isinstance(value, (int, float, Decimal)):
            return self._render_number(value)
        if isinstance(value, datetime):
            return format_datetime(value, "short", locale=self.locale)
        return str(value)

    def _render_number(self, value) -> str:
        # Babel quantizes in the active decimal context; widen it for big values
        digits = Decimal(str(value)).adjusted()
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, digits + 10)
            return format_decimal(value, locale=self.locale)


def interpolate(template: str, parameters: Sequence[Any], locale: Locale) -> str:
    """
    Substitute positional parameters into a message template.

    Placeholders are ``{0}``, ``{1}``, ... with optional format specs
    (``{0:.2f}``); literal braces are written ``{{`` and ``}}``. Numbers and
    datetimes without a spec are rendered in the given locale. Unused
    parameters are ignored.

    Args:
        template: Message template
        parameters: Values for the placeholders
        locale: Locale for numbers and dates

    Returns:
        Interpolated message

    Raises:
        InterpolationError: If the template cannot be filled
    """
    formatter = _PositionalFormatter(template, parameters, locale)
    try:
        return formatter.vformat(template, tuple(parameters), {})
    except InterpolationError:
        raise
    except (ValueError, IndexError, KeyError, AttributeError, TypeError) as e:
        raise InterpolationError(str(e), template, parameters) from e


def thrown_message(thrown) -> str:
    """Message text of an attached error."""
    if isinstance(thrown, BaseException):
        return str(thrown)
    message = getattr(thrown, "message", None)
    return str(thrown) if message is None else message


def render_stack_trace(thrown) -> str:
    """
    Render the stack trace of an attached error without trailing newlines.

    Accepts exceptions, ThrownInfo values and any object exposing a
    ``render_stack_trace()`` method.
    """
    if isinstance(thrown, BaseException):
        rendered = "".join(
            traceback.format_exception(type(thrown), thrown, thrown.__traceback__)
        )
    elif isinstance(thrown, ThrownInfo):
        rendered = thrown.render()
    elif callable(getattr(thrown, "render_stack_trace", None)):
        rendered = thrown.render_stack_trace()
    else:
        rendered = str(thrown)
    return rendered.rstrip("\n")


def resolve_message(event: LogEvent, locale: Locale) -> str:
    """
    Build the message part of a log line.

    The template is interpolated only when the event has parameters. An
    empty result falls back to the attached error's message, and the
    error's stack trace is appended on its own lines.
    """
    message = event.message
    if message is not None and event.parameters:
        message = interpolate(message, event.parameters, locale)

    if not message and event.thrown is not None:
        message = thrown_message(event.thrown)
    message = message or ""

    if event.thrown is not None:
        message += "\n" + render_stack_trace(event.thrown)
    return message
