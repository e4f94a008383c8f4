from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .direction import Direction
from .passenger import Passenger


@dataclass(frozen=True)
class ElevatorSnapshot:
    """Read-only view of the car, safe to hand to other threads"""
    elevator_id: str
    current_floor: int
    direction: Direction
    requests: Tuple[int, ...]
    onboard_count: int
    capacity: int


class Elevator:
    """
    State of a single elevator car and the SCAN destination algorithm.

    The car keeps a set of requested floors and a FIFO of onboard passengers.
    Every mutator is total: a rejected change returns False (or an empty
    result) instead of raising, and the caller decides whether to log it.

    Invariants:
    - min_floor <= current_floor <= max_floor
    - len(passengers onboard) <= capacity
    - every requested floor lies within [min_floor, max_floor]
    - a floor equal to the current floor is never added as a request

    This class is not thread-safe; ElevatorService serializes access.
    """

    def __init__(self, min_floor: int, max_floor: int, capacity: int,
                 elevator_id: str = "ELV-DEFAULT", start_floor: Optional[int] = None):
        if min_floor >= max_floor:
            raise ValueError(f"min_floor ({min_floor}) must be lower than max_floor ({max_floor})")
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if start_floor is not None and not (min_floor <= start_floor <= max_floor):
            raise ValueError(f"start_floor {start_floor} must be between {min_floor} and {max_floor}")

        self.elevator_id = elevator_id
        self.min_floor = min_floor
        self.max_floor = max_floor
        self.capacity = capacity

        self.current_floor = start_floor if start_floor is not None else min_floor
        self.direction = Direction.IDLE
        self._requests = set()
        self.passengers_onboard = deque()

    # ========== Floor state ==========

    def is_valid_floor(self, floor: int) -> bool:
        return self.min_floor <= floor <= self.max_floor

    def set_current_floor(self, floor: int) -> bool:
        """Move the car to `floor`. Returns False if the floor is out of range."""
        if not self.is_valid_floor(floor):
            return False
        self.current_floor = floor
        return True

    def set_direction(self, direction: Direction):
        self.direction = direction

    def is_at_boundary(self) -> bool:
        return self.current_floor in (self.min_floor, self.max_floor)

    def can_move_to(self, floor: int) -> bool:
        return self.is_valid_floor(floor) and floor != self.current_floor

    def stop(self):
        self.direction = Direction.IDLE

    def reset(self):
        """Return to min_floor with no requests and no passengers."""
        self.current_floor = self.min_floor
        self.direction = Direction.IDLE
        self._requests.clear()
        self.passengers_onboard.clear()

    # ========== Requests ==========

    def add_request(self, floor: int) -> bool:
        """
        Register a stop at `floor`.

        Rejected when the floor is out of range or is the current floor.
        Adding an existing request is a no-op that still returns True.
        """
        if not self.is_valid_floor(floor) or floor == self.current_floor:
            return False
        self._requests.add(floor)
        return True

    def remove_request(self, floor: int):
        self._requests.discard(floor)

    def has_request_at(self, floor: int) -> bool:
        return floor in self._requests

    def has_requests(self) -> bool:
        return bool(self._requests)

    @property
    def requests(self) -> List[int]:
        """Requested floors in ascending order (copy)"""
        return sorted(self._requests)

    # ========== Passengers ==========

    def is_full(self) -> bool:
        return len(self.passengers_onboard) >= self.capacity

    def is_empty(self) -> bool:
        return not self.passengers_onboard

    @property
    def passenger_count(self) -> int:
        return len(self.passengers_onboard)

    @property
    def available_capacity(self) -> int:
        return self.capacity - len(self.passengers_onboard)

    def add_passenger(self, passenger: Passenger) -> bool:
        """
        Put a passenger in the car and request their destination.

        Rejected when the car is full or the passenger is not waiting at
        the current floor.
        """
        if self.is_full() or passenger.start_floor != self.current_floor:
            return False
        self.passengers_onboard.append(passenger)
        self.add_request(passenger.destination_floor)
        return True

    def remove_passengers_at(self, floor: int) -> List[Passenger]:
        """Remove and return everyone whose destination is `floor`, keeping the order of the rest."""
        leaving = [p for p in self.passengers_onboard if p.destination_floor == floor]
        if leaving:
            self.passengers_onboard = deque(
                p for p in self.passengers_onboard if p.destination_floor != floor
            )
        return leaving

    @property
    def current_passengers(self) -> List[Passenger]:
        return list(self.passengers_onboard)

    # ========== SCAN algorithm ==========

    def next_destination(self) -> Optional[int]:
        """
        Pick the next floor to head for under SCAN.

        UP: nearest request above; DOWN: nearest request below. When nothing
        is left ahead but requests remain behind, the direction flips and the
        search runs once more the other way. IDLE picks the closest request
        (lower floor on a tie) and points the car at it.

        Returns:
            Floor number, or None if there is nothing to head for
        """
        if not self._requests:
            return None

        if self.direction is Direction.UP:
            return self._next_upward_floor()
        if self.direction is Direction.DOWN:
            return self._next_downward_floor()
        return self._closest_floor()

    def _next_upward_floor(self, allow_reversal: bool = True) -> Optional[int]:
        above = [floor for floor in self._requests if floor > self.current_floor]
        if above:
            return min(above)
        if allow_reversal and self._has_requests_below():
            self.direction = Direction.DOWN
            return self._next_downward_floor(allow_reversal=False)
        return None

    def _next_downward_floor(self, allow_reversal: bool = True) -> Optional[int]:
        below = [floor for floor in self._requests if floor < self.current_floor]
        if below:
            return max(below)
        if allow_reversal and self._has_requests_above():
            self.direction = Direction.UP
            return self._next_upward_floor(allow_reversal=False)
        return None

    def _closest_floor(self) -> Optional[int]:
        closest = None
        min_distance = None
        # Ascending order with a strict comparison: lower floor wins a tie
        for floor in sorted(self._requests):
            distance = abs(floor - self.current_floor)
            if min_distance is None or distance < min_distance:
                min_distance = distance
                closest = floor

        if closest is not None:
            direction = Direction.between(self.current_floor, closest)
            if direction is not Direction.IDLE:
                self.direction = direction
        return closest

    def _has_requests_above(self) -> bool:
        return any(floor > self.current_floor for floor in self._requests)

    def _has_requests_below(self) -> bool:
        return any(floor < self.current_floor for floor in self._requests)

    def has_requests_in(self, direction: Direction) -> bool:
        """Whether any request lies ahead when travelling in `direction`."""
        if direction is Direction.UP:
            return self._has_requests_above()
        if direction is Direction.DOWN:
            return self._has_requests_below()
        return False

    # ========== Info ==========

    def snapshot(self) -> ElevatorSnapshot:
        return ElevatorSnapshot(
            elevator_id=self.elevator_id,
            current_floor=self.current_floor,
            direction=self.direction,
            requests=tuple(self.requests),
            onboard_count=len(self.passengers_onboard),
            capacity=self.capacity,
        )

    def __repr__(self):
        return (f"{self.elevator_id}[floor:{self.current_floor}, direction:{self.direction}, "
                f"requests:{self.requests}, passengers:{len(self.passengers_onboard)}/{self.capacity}]")
