import itertools
import time
from typing import Optional

from .direction import Direction


class Passenger:
    """
    One transport request, from the moment it is submitted until the
    passenger leaves the car.

    Lifecycle: waiting -> boarded -> arrived. Timestamps come from
    time.monotonic(), so they never move backwards even if the system
    clock is adjusted.
    """
    # Passenger ID counter shared across all instances, never reused
    _passenger_id_counter = itertools.count(1)

    def __init__(self, start_floor: int, destination_floor: int, request_time: Optional[float] = None):
        self.passenger_id: int = next(self._passenger_id_counter)
        self.start_floor = start_floor
        self.destination_floor = destination_floor
        self.request_time: float = request_time if request_time is not None else time.monotonic()
        self.boarding_time: Optional[float] = None
        self.arrival_time: Optional[float] = None

    @property
    def name(self) -> str:
        return f"Passenger_{self.passenger_id}"

    @property
    def direction(self) -> Direction:
        return Direction.between(self.start_floor, self.destination_floor)

    def board(self, timestamp: Optional[float] = None):
        """Record boarding. Only the first call has an effect."""
        if self.boarding_time is not None:
            return
        self.boarding_time = timestamp if timestamp is not None else time.monotonic()

    def arrive(self, timestamp: Optional[float] = None):
        """Record arrival at the destination. Only the first call has an effect."""
        if self.arrival_time is not None:
            return
        self.arrival_time = timestamp if timestamp is not None else time.monotonic()

    def has_boarded(self) -> bool:
        return self.boarding_time is not None

    def has_arrived(self) -> bool:
        return self.arrival_time is not None

    # ========================================
    # Passenger Metrics Methods
    # ========================================

    def get_waiting_time(self, now: Optional[float] = None) -> float:
        """
        Get waiting time from request to boarding.

        While still waiting, measures up to `now` (defaults to the current time).
        """
        if self.boarding_time is not None:
            return self.boarding_time - self.request_time
        current = now if now is not None else time.monotonic()
        return current - self.request_time

    def get_riding_time(self) -> float:
        """Get riding time from boarding to arrival, 0 if the trip is not complete."""
        if self.boarding_time is None or self.arrival_time is None:
            return 0.0
        return self.arrival_time - self.boarding_time

    def get_total_time(self, now: Optional[float] = None) -> float:
        """Get total journey time, or the waiting time so far if not yet arrived."""
        if self.arrival_time is None:
            return self.get_waiting_time(now)
        return self.arrival_time - self.request_time

    def __eq__(self, other):
        if not isinstance(other, Passenger):
            return NotImplemented
        return self.passenger_id == other.passenger_id

    def __hash__(self):
        return hash(self.passenger_id)

    def __repr__(self):
        return f"{self.name}[{self.start_floor}->{self.destination_floor}]"
