"""
Shared fixtures for the test suite.
"""

import threading

import matplotlib
matplotlib.use("Agg")

import pytest

from config.simulation import TimingConfig
from controller import ElevatorService
from simulator.interfaces.log_sink import ILogSink, LogLevel


class RecordingLogSink(ILogSink):
    """Keeps every (level, message) pair it receives"""

    def __init__(self, min_level: LogLevel = LogLevel.DEBUG):
        super().__init__(min_level)
        self.records = []
        self._lock = threading.Lock()

    def _write(self, level: LogLevel, message: str):
        with self._lock:
            self.records.append((level, message))

    def messages(self, level: LogLevel = None):
        with self._lock:
            return [m for lvl, m in self.records if level is None or lvl == level]

    def contains(self, text: str, level: LogLevel = None) -> bool:
        return any(text in m for m in self.messages(level))


@pytest.fixture
def log_sink():
    return RecordingLogSink()


@pytest.fixture
def fast_timing():
    """Tick fast enough for threaded tests to finish in well under a second"""
    return TimingConfig(tick_interval=0.01, poll_timeout=0.01, shutdown_grace=1.0)


@pytest.fixture
def make_service(log_sink):
    """Build an ElevatorService that logs into the recording sink"""
    created = []

    def _make(min_floor=1, max_floor=10, capacity=5, **kwargs):
        kwargs.setdefault("log_sink", log_sink)
        service = ElevatorService(min_floor, max_floor, capacity, **kwargs)
        created.append(service)
        return service

    yield _make

    for service in created:
        service.stop_simulation()


def drive_until_idle(service: ElevatorService, max_ticks: int = 200) -> int:
    """
    Run the engine's cycles on the calling thread until the system is idle.

    Each tick drains the request channel, moves the car, then services the
    floor, which is the order the workers settle into when threaded.

    Returns:
        Number of ticks taken
    """
    for tick in range(1, max_ticks + 1):
        while service.ingest_next_request(timeout=0) is not None:
            pass
        service.advance_car()
        if service.service_current_floor():
            return tick
    raise AssertionError(f"system still busy after {max_ticks} ticks: {service.elevator}")
