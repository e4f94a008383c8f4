"""
Elevator Simulator - Core simulation model

This package provides the car model, the SCAN destination algorithm,
the request channel and the log sink capability used by the
dispatch engine.
"""

__version__ = "0.2.0"

from .core.direction import Direction
from .core.elevator import Elevator, ElevatorSnapshot
from .core.passenger import Passenger
from .core.entity import Entity

from .infrastructure.message_broker import MessageBroker
from .infrastructure.realtime_env import RealtimeClock

from .interfaces.log_sink import ILogSink, LogLevel
from .interfaces.listeners import WorkerStatus

__all__ = [
    'Direction',
    'Elevator',
    'ElevatorSnapshot',
    'Passenger',
    'Entity',
    'MessageBroker',
    'RealtimeClock',
    'ILogSink',
    'LogLevel',
    'WorkerStatus',
]
