from collections import deque
from typing import List, Optional

from simulator.core.direction import Direction
from simulator.core.passenger import Passenger
from simulator.interfaces.log_sink import ILogSink


class PassengerService:
    """
    Waiting queue and completed history of passengers.

    Decides who may board at a floor and records exits. The onboard set is
    owned by the Elevator: this service picks eligible passengers, the caller
    puts them in the car.

    Not thread-safe on its own; ElevatorService holds its lock around every call.
    """

    def __init__(self, log_sink: ILogSink):
        self.log_sink = log_sink
        self.waiting_passengers = deque()
        self.completed_passengers: List[Passenger] = []

    def add_passenger_request(self, start_floor: int, destination_floor: int) -> Passenger:
        """Create a passenger and put them at the back of the waiting queue."""
        passenger = Passenger(start_floor, destination_floor)
        self.add_passenger(passenger)
        return passenger

    def add_passenger(self, passenger: Passenger):
        """Queue a passenger created elsewhere."""
        self.waiting_passengers.append(passenger)
        self.log_sink.info(f"Passenger request queued: {passenger}")

    def get_exiting_passengers(self, onboard_passengers: List[Passenger], current_floor: int) -> List[Passenger]:
        """Onboard passengers whose destination is `current_floor`, in their current order."""
        return [p for p in onboard_passengers if p.destination_floor == current_floor]

    def process_passenger_exit(self, passenger: Passenger, timestamp: Optional[float] = None):
        """
        Stamp arrival and move the passenger to the completed history.

        Must be called exactly once per passenger; a second call would count
        them twice.
        """
        passenger.arrive(timestamp)
        self.completed_passengers.append(passenger)
        self.log_sink.info(f"  {passenger} exits (total time: {passenger.get_total_time():.1f}s)")

    def get_boarding_passengers(self, current_floor: int, elevator_direction: Direction,
                                available_capacity: int) -> List[Passenger]:
        """
        Take up to `available_capacity` eligible passengers off the waiting queue.

        A passenger is eligible when waiting at `current_floor` and either the
        car is IDLE or the passenger travels the car's way. Queue order is kept
        for both the chosen and the remaining passengers.
        """
        boarding: List[Passenger] = []
        if available_capacity <= 0:
            return boarding

        remaining = deque()
        for passenger in self.waiting_passengers:
            eligible = (
                len(boarding) < available_capacity
                and passenger.start_floor == current_floor
                and (elevator_direction is Direction.IDLE or passenger.direction is elevator_direction)
            )
            if eligible:
                boarding.append(passenger)
            else:
                remaining.append(passenger)
        self.waiting_passengers = remaining
        return boarding

    def process_passenger_boarding(self, passenger: Passenger, timestamp: Optional[float] = None):
        """Stamp boarding. The caller must also add the passenger to the Elevator."""
        passenger.board(timestamp)
        self.log_sink.info(f"  {passenger} boards (waited: {passenger.get_waiting_time():.1f}s)")

    def return_to_queue(self, passengers: List[Passenger]):
        """Put passengers the car refused back at the front of the queue, keeping their order."""
        for passenger in reversed(passengers):
            self.waiting_passengers.appendleft(passenger)

    def get_waiting_passenger_floors(self) -> List[int]:
        """Start floors of all waiting passengers, in queue order."""
        return [p.start_floor for p in self.waiting_passengers]

    def has_waiting_passenger_at(self, floor: int, direction: Direction) -> bool:
        """Whether someone at `floor` is waiting to travel `direction`."""
        return any(
            p.start_floor == floor and p.direction is direction
            for p in self.waiting_passengers
        )

    def has_waiting_passengers(self) -> bool:
        return bool(self.waiting_passengers)

    def get_waiting_passengers(self) -> List[Passenger]:
        return list(self.waiting_passengers)

    def get_completed_passengers(self) -> List[Passenger]:
        return list(self.completed_passengers)

    def get_waiting_passenger_count(self) -> int:
        return len(self.waiting_passengers)

    def clear(self):
        self.waiting_passengers.clear()
        self.completed_passengers.clear()
