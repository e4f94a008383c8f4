"""
End-of-run summary and trajectory diagram
"""

import pytest

from analyzer import SimulationStatistics, StatisticsSummary
from simulator.core.direction import Direction
from simulator.core.passenger import Passenger


def _completed(request, board, arrive, start=1, dest=5):
    passenger = Passenger(start, dest, request_time=request)
    passenger.board(board)
    passenger.arrive(arrive)
    return passenger


def test_summary_over_completed_passengers():
    stats = SimulationStatistics()
    completed = [_completed(0.0, 2.0, 6.0), _completed(1.0, 5.0, 9.0)]
    waiting = [Passenger(3, 1)]

    summary = stats.summarize(completed, waiting, total_ticks=12, final_floor=5)

    assert summary.completed_count == 2
    assert summary.waiting_count == 1
    assert summary.average_waiting_time == pytest.approx(3.0)
    assert summary.max_waiting_time == pytest.approx(4.0)
    assert summary.average_riding_time == pytest.approx(4.0)
    assert summary.average_total_time == pytest.approx(7.0)
    assert summary.total_ticks == 12
    assert summary.final_floor == 5


def test_summary_without_completions():
    summary = SimulationStatistics().summarize([], [], total_ticks=0, final_floor=1)
    assert summary == StatisticsSummary(0, 0, 0, 0.0, 0.0, 0.0, 0.0, 1)


def test_trajectory_recording():
    stats = SimulationStatistics("ELV-T")
    stats.record_tick(1, 1, Direction.IDLE, 0)
    stats.record_tick(2, 2, Direction.UP, 1)
    assert stats.get_trajectory() == [(1, 1, Direction.IDLE, 0), (2, 2, Direction.UP, 1)]
    stats.clear()
    assert stats.get_trajectory() == []


def test_plot_writes_file(tmp_path):
    stats = SimulationStatistics("ELV-T")
    for tick, floor in enumerate([1, 2, 3, 3, 2, 1], start=1):
        stats.record_tick(tick, floor, Direction.UP, tick % 2)

    output = tmp_path / "trajectory.png"
    assert stats.plot_trajectory_diagram(str(output), min_floor=1, max_floor=5) == str(output)
    assert output.stat().st_size > 0


def test_plot_skipped_without_samples(tmp_path):
    output = tmp_path / "empty.png"
    assert SimulationStatistics().plot_trajectory_diagram(str(output)) is None
    assert not output.exists()
