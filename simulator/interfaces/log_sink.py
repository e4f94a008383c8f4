"""
Log Sink Interface

Defines where the engine's log messages go.
"""

from abc import ABC, abstractmethod
from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels, ordered by severity"""
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @classmethod
    def parse(cls, value) -> "LogLevel":
        """
        Accept a LogLevel or its name (case-insensitive, WARNING allowed).

        Raises:
            ValueError: If the name is not a known level
        """
        if isinstance(value, LogLevel):
            return value
        name = str(value).strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown log level: {value}") from None

    def __str__(self):
        return self.name


class ILogSink(ABC):
    """
    Interface for log back ends

    The engine only ever calls log(level, message); console, file and
    standard-library sinks are interchangeable without engine changes.

    Design Notes:
        - A sink is handed to the engine at construction (no global logger)
        - log() may be called from several worker threads at once
        - Messages below min_level are dropped
    """

    def __init__(self, min_level: LogLevel = LogLevel.DEBUG):
        self.min_level = LogLevel.parse(min_level)

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.min_level

    def log(self, level: LogLevel, message: str):
        """
        Record one message.

        Args:
            level: Severity of the message
            message: Text to record
        """
        if self.is_enabled_for(level):
            self._write(level, message)

    @abstractmethod
    def _write(self, level: LogLevel, message: str):
        """Emit a message that passed the level filter"""
        pass

    def debug(self, message: str):
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str):
        self.log(LogLevel.INFO, message)

    def warn(self, message: str):
        self.log(LogLevel.WARN, message)

    def error(self, message: str):
        self.log(LogLevel.ERROR, message)

    def close(self):
        """Release resources held by the sink (no-op by default)"""
        return None
