"""Console logging implementation"""

from .log_sink import ConsoleLogSink

__all__ = [
    'ConsoleLogSink',
]
