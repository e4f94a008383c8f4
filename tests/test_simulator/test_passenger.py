"""
Passenger lifecycle and timing metrics
"""

from types import SimpleNamespace

from simulator.core.direction import Direction
from simulator.core.passenger import Passenger


def test_ids_are_unique_and_increasing():
    first = Passenger(1, 5)
    second = Passenger(1, 5)
    assert second.passenger_id > first.passenger_id
    assert first != second
    assert first.name == f"Passenger_{first.passenger_id}"


def test_direction_follows_trip():
    assert Passenger(2, 8).direction is Direction.UP
    assert Passenger(8, 2).direction is Direction.DOWN


def test_timestamps_and_metrics():
    passenger = Passenger(3, 7, request_time=100.0)
    assert not passenger.has_boarded()
    assert passenger.get_waiting_time(now=104.0) == 4.0

    passenger.board(105.0)
    passenger.arrive(111.0)

    assert passenger.has_boarded() and passenger.has_arrived()
    assert passenger.get_waiting_time() == 5.0
    assert passenger.get_riding_time() == 6.0
    assert passenger.get_total_time() == 11.0


def test_board_and_arrive_only_record_first_call():
    passenger = Passenger(3, 7, request_time=100.0)
    passenger.board(101.0)
    passenger.board(150.0)
    passenger.arrive(102.0)
    passenger.arrive(160.0)
    assert passenger.boarding_time == 101.0
    assert passenger.arrival_time == 102.0


def test_riding_time_is_zero_until_arrival():
    passenger = Passenger(3, 7, request_time=100.0)
    passenger.board(101.0)
    assert passenger.get_riding_time() == 0.0


def test_default_timestamps_are_ordered():
    passenger = Passenger(1, 2)
    passenger.board()
    passenger.arrive()
    assert passenger.arrival_time >= passenger.boarding_time >= passenger.request_time


def test_repr():
    passenger = Passenger(4, 9)
    assert repr(passenger) == f"Passenger_{passenger.passenger_id}[4->9]"


def test_default_timestamps_use_monotonic_clock(monkeypatch):
    import simulator.core.passenger as passenger_module

    ticks = iter([50.0, 51.0, 53.0])
    monkeypatch.setattr(passenger_module, "time", SimpleNamespace(monotonic=lambda: next(ticks)))

    passenger = Passenger(1, 2)
    passenger.board()
    passenger.arrive()
    assert (passenger.request_time, passenger.boarding_time, passenger.arrival_time) == (50.0, 51.0, 53.0)
