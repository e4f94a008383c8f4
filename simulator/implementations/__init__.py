"""
Log sink implementations

Provides concrete log back ends:
- Console: print to standard output
- File: append to a text file
- Stdlib: forward to the logging module
"""

from .console import ConsoleLogSink
from .file import FileLogSink
from .stdlib import StdLoggingSink
from .log_sink_factory import LogSinkFactory

__all__ = [
    'ConsoleLogSink',
    'FileLogSink',
    'StdLoggingSink',
    'LogSinkFactory',
]
