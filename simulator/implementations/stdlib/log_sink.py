"""
Standard-library logging sink

Forwards messages to a `logging.Logger`, so handlers and formatters
configured by the host application apply.
"""

import logging
from typing import Optional

from simulator.interfaces.log_sink import ILogSink, LogLevel


_LEVEL_MAP = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class StdLoggingSink(ILogSink):
    """Log sink backed by the `logging` module"""

    def __init__(self, logger_name: str = "elevator", min_level: LogLevel = LogLevel.DEBUG,
                 logger: Optional[logging.Logger] = None):
        super().__init__(min_level)
        self.logger = logger if logger is not None else logging.getLogger(logger_name)

    def _write(self, level: LogLevel, message: str):
        self.logger.log(_LEVEL_MAP[level], message)
