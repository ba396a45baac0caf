"""
Log level enumeration

Ranks follow java.util.logging so records from JVM-style pipelines keep
their ordering.
"""

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Ordered from most verbose to most severe.
    """

    FINEST = 300    # Highly detailed tracing
    FINER = 400     # Fairly detailed tracing
    FINE = 500      # Tracing information
    CONFIG = 700    # Static configuration messages
    INFO = 800      # Informational messages
    WARNING = 900   # Potential problems
    SEVERE = 1000   # Serious failures

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.upper()
        if level_str in cls.__members__:
            return cls[level_str]
        raise ValueError(f"Invalid log level: {level_str}")

    @classmethod
    def from_python_level(cls, levelno: int) -> "LogLevel":
        """
        Map a stdlib ``logging`` level number onto the nearest LogLevel.

        Args:
            levelno: Numeric level, e.g. ``logging.WARNING``

        Returns:
            LogLevel enum value
        """
        if levelno >= logging.ERROR:
            return cls.SEVERE
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.FINE
        return cls.FINEST
