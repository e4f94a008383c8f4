"""
Waiting queue, boarding eligibility and exit bookkeeping
"""

import pytest

from controller.passenger_service import PassengerService
from simulator.core.direction import Direction
from simulator.core.passenger import Passenger


@pytest.fixture
def service(log_sink):
    return PassengerService(log_sink)


def test_add_request_queues_passenger(service):
    passenger = service.add_passenger_request(3, 7)
    assert service.get_waiting_passengers() == [passenger]
    assert service.get_waiting_passenger_floors() == [3]
    assert service.has_waiting_passengers()


def test_boarding_matches_floor_and_direction(service):
    up = service.add_passenger_request(4, 8)
    down = service.add_passenger_request(4, 1)
    elsewhere = service.add_passenger_request(6, 9)

    boarding = service.get_boarding_passengers(4, Direction.UP, available_capacity=5)

    assert boarding == [up]
    assert service.get_waiting_passengers() == [down, elsewhere]


def test_idle_car_accepts_any_direction(service):
    up = service.add_passenger_request(5, 9)
    down = service.add_passenger_request(5, 1)
    assert service.get_boarding_passengers(5, Direction.IDLE, available_capacity=5) == [up, down]
    assert not service.has_waiting_passengers()


def test_boarding_respects_capacity_in_queue_order(service):
    first = service.add_passenger_request(2, 6)
    second = service.add_passenger_request(2, 7)
    third = service.add_passenger_request(2, 8)

    assert service.get_boarding_passengers(2, Direction.UP, available_capacity=2) == [first, second]
    assert service.get_waiting_passengers() == [third]
    assert service.get_boarding_passengers(2, Direction.UP, available_capacity=0) == []


def test_return_to_queue_puts_passengers_in_front(service):
    a = service.add_passenger_request(2, 6)
    b = service.add_passenger_request(2, 7)
    c = service.add_passenger_request(3, 1)
    boarding = service.get_boarding_passengers(2, Direction.UP, available_capacity=5)
    service.return_to_queue(boarding)
    assert service.get_waiting_passengers() == [a, b, c]


def test_exit_stamps_arrival_and_records_completion(service):
    passenger = Passenger(2, 6, request_time=10.0)
    service.process_passenger_boarding(passenger, timestamp=12.0)
    service.process_passenger_exit(passenger, timestamp=20.0)

    assert service.get_completed_passengers() == [passenger]
    assert passenger.get_total_time() == 10.0


def test_exiting_passengers(service):
    a, b = Passenger(1, 5), Passenger(1, 8)
    assert service.get_exiting_passengers([a, b], 5) == [a]
    assert service.get_exiting_passengers([a, b], 3) == []


def test_has_waiting_passenger_at(service):
    service.add_passenger_request(4, 1)
    service.add_passenger_request(6, 9)
    assert service.has_waiting_passenger_at(4, Direction.DOWN)
    assert not service.has_waiting_passenger_at(4, Direction.UP)
    assert service.has_waiting_passenger_at(6, Direction.UP)
    assert not service.has_waiting_passenger_at(7, Direction.UP)


def test_getters_return_copies(service):
    service.add_passenger_request(1, 2)
    service.get_waiting_passengers().clear()
    assert service.get_waiting_passenger_count() == 1
    service.clear()
    assert service.get_waiting_passenger_count() == 0
    assert service.get_completed_passengers() == []
