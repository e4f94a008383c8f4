"""Interface definitions for simulator components"""

from .log_sink import ILogSink, LogLevel
from .listeners import ElevatorStateListener, WorkerStatus, WorkerStatusListener

__all__ = [
    'ILogSink',
    'LogLevel',
    'ElevatorStateListener',
    'WorkerStatus',
    'WorkerStatusListener',
]
