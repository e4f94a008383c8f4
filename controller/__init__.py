"""
Elevator Dispatch Controller

This package provides the SCAN dispatch engine, its passenger
bookkeeping and the worker activities that drive it.
"""

__version__ = "0.2.0"

from .elevator_service import ElevatorService, SimulationState, REQUEST_TOPIC
from .passenger_service import PassengerService
from .workers import MOVEMENT_WORKER, REQUEST_WORKER, STATUS_WORKER


def create(min_floor: int, max_floor: int, capacity: int, **kwargs) -> ElevatorService:
    """
    Construct one dispatch engine.

    Keyword arguments (log_sink, timing, elevator_id, start_floor) are
    passed through to ElevatorService.
    """
    return ElevatorService(min_floor, max_floor, capacity, **kwargs)


__all__ = [
    'ElevatorService',
    'SimulationState',
    'PassengerService',
    'create',
    'REQUEST_TOPIC',
    'REQUEST_WORKER',
    'MOVEMENT_WORKER',
    'STATUS_WORKER',
]
