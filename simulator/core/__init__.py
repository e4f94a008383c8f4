"""Core simulation entities"""

from .direction import Direction
from .passenger import Passenger
from .elevator import Elevator, ElevatorSnapshot
from .entity import Entity

__all__ = [
    'Direction',
    'Passenger',
    'Elevator',
    'ElevatorSnapshot',
    'Entity',
]
