"""
Log event data structure

Describes a single logging call as handed over by the logging pipeline.
"""

import time
import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple, Union, Dict, Any

from formatter_module.core.log_level import LogLevel


def _now_millis() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class ThrownInfo:
    """
    Error attached to a log event.

    Carries an already rendered stack trace so events can cross process
    boundaries without the live exception object.
    """

    type_name: str
    message: str = ""
    stack_trace: str = ""

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ThrownInfo":
        """
        Capture a live exception.

        Args:
            exc: Exception to capture, raised or not

        Returns:
            New ThrownInfo instance
        """
        rendered = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        return cls(
            type_name=type(exc).__qualname__,
            message=str(exc),
            stack_trace=rendered,
        )

    def render(self) -> str:
        """Return the stack trace, or a one line summary when there is none."""
        if self.stack_trace:
            return self.stack_trace
        if self.message:
            return f"{self.type_name}: {self.message}\n"
        return f"{self.type_name}\n"


Thrown = Union[BaseException, ThrownInfo]


@dataclass(frozen=True)
class LogEvent:
    """
    Log event data structure.

    Contains everything needed to render one log line. Instances are
    immutable; ``parameters`` is always stored as a tuple.
    """

    level: LogLevel
    message: Optional[str] = None
    timestamp_millis: int = field(default_factory=_now_millis)
    source_class_name: Optional[str] = None
    source_method_name: Optional[str] = None
    parameters: Tuple[Any, ...] = ()
    thrown: Optional[Thrown] = None

    def __post_init__(self):
        """Validate log event after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if self.parameters is None:
            object.__setattr__(self, "parameters", ())
        elif not isinstance(self.parameters, tuple):
            object.__setattr__(self, "parameters", tuple(self.parameters))
        if self.message is not None and not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))

    @property
    def timestamp(self) -> datetime:
        """Event time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp_millis / 1000, tz=timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log event to dictionary.

        Returns:
            Dictionary representation
        """
        thrown = self.thrown
        if isinstance(thrown, BaseException):
            thrown = ThrownInfo.from_exception(thrown)
        return {
            "level": self.level.name,
            "message": self.message,
            "timestamp_millis": self.timestamp_millis,
            "source_class_name": self.source_class_name,
            "source_method_name": self.source_method_name,
            "parameters": list(self.parameters),
            "thrown": None if thrown is None else {
                "type_name": thrown.type_name,
                "message": thrown.message,
                "stack_trace": thrown.stack_trace,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEvent":
        """
        Create log event from dictionary.

        Args:
            data: Dictionary with log event data

        Returns:
            New LogEvent instance
        """
        thrown = data.get("thrown")
        return cls(
            level=LogLevel[data["level"]],
            message=data.get("message"),
            timestamp_millis=data.get("timestamp_millis", 0),
            source_class_name=data.get("source_class_name"),
            source_method_name=data.get("source_method_name"),
            parameters=tuple(data.get("parameters") or ()),
            thrown=ThrownInfo(**thrown) if thrown else None,
        )
