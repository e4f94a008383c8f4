"""File logging implementation"""

from .log_sink import FileLogSink

__all__ = [
    'FileLogSink',
]
