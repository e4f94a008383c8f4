"""Standard-library logging implementation"""

from .log_sink import StdLoggingSink

__all__ = [
    'StdLoggingSink',
]
