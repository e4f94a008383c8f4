"""
Direction of travel for the elevator car and for passengers.
"""

from enum import Enum


class Direction(Enum):
    """Tri-state travel direction"""
    UP = "UP"
    DOWN = "DOWN"
    IDLE = "IDLE"

    @classmethod
    def between(cls, start_floor: int, destination_floor: int) -> "Direction":
        """
        Derive the direction of a trip.

        Args:
            start_floor: Floor the trip starts at
            destination_floor: Floor the trip ends at

        Returns:
            UP if the destination is higher, DOWN if lower, IDLE if equal
        """
        if destination_floor > start_floor:
            return cls.UP
        if destination_floor < start_floor:
            return cls.DOWN
        return cls.IDLE

    def opposite(self) -> "Direction":
        if self is Direction.UP:
            return Direction.DOWN
        if self is Direction.DOWN:
            return Direction.UP
        return Direction.IDLE

    def __str__(self):
        return self.value
