"""
Log Sink Factory

Builds the configured log sink.
"""

from simulator.interfaces.log_sink import ILogSink, LogLevel
from .console import ConsoleLogSink
from .file import FileLogSink
from .stdlib import StdLoggingSink


class LogSinkFactory:
    """
    Factory for log sinks

    Sink types:
    - "console": ConsoleLogSink
    - "file": FileLogSink (requires file_path)
    - "stdlib": StdLoggingSink
    """

    SINK_TYPES = ("console", "file", "stdlib")

    @staticmethod
    def create(sink: str = "console", level="INFO", file_path=None,
               logger_name: str = "elevator") -> ILogSink:
        """
        Create a log sink

        Args:
            sink: Sink type name
            level: Minimum level (LogLevel or name)
            file_path: Log file path for the "file" sink
            logger_name: Logger name for the "stdlib" sink

        Returns:
            ILogSink instance

        Raises:
            ValueError: If the sink type is unknown or file_path is missing
        """
        min_level = LogLevel.parse(level)
        if sink == "console":
            return ConsoleLogSink(min_level=min_level)
        if sink == "file":
            if not file_path:
                raise ValueError("file sink requires file_path")
            return FileLogSink(file_path, min_level=min_level)
        if sink == "stdlib":
            return StdLoggingSink(logger_name=logger_name, min_level=min_level)
        raise ValueError(f"Unknown log sink: {sink} (expected one of {LogSinkFactory.SINK_TYPES})")

    @staticmethod
    def from_config(logging_config) -> ILogSink:
        """Create a sink from a LoggingConfig"""
        return LogSinkFactory.create(
            sink=logging_config.sink,
            level=logging_config.level,
            file_path=logging_config.file_path,
            logger_name=logging_config.logger_name,
        )
