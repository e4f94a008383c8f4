import threading
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from simulator.core.direction import Direction
from simulator.core.passenger import Passenger


@dataclass(frozen=True)
class StatisticsSummary:
    """Figures reported at the end of a run (times in seconds)"""
    total_ticks: int
    completed_count: int
    waiting_count: int
    average_waiting_time: float
    max_waiting_time: float
    average_riding_time: float
    average_total_time: float
    final_floor: int


class SimulationStatistics:
    """
    Records what the car did during a run and summarizes the passengers.

    The status monitor adds one trajectory sample per tick; samples can be
    read back or drawn as a travel diagram once the run is over.
    """

    def __init__(self, elevator_id: str = "ELV-DEFAULT"):
        self.elevator_id = elevator_id
        self.trajectory: List[Tuple[int, int, Direction, int]] = []  # (tick, floor, direction, onboard)
        self._lock = threading.Lock()

    def record_tick(self, tick: int, floor: int, direction: Direction, onboard: int):
        with self._lock:
            self.trajectory.append((tick, floor, direction, onboard))

    def get_trajectory(self) -> List[Tuple[int, int, Direction, int]]:
        with self._lock:
            return list(self.trajectory)

    def clear(self):
        with self._lock:
            self.trajectory.clear()

    def summarize(self, completed: Iterable[Passenger], waiting: Iterable[Passenger],
                  total_ticks: int, final_floor: int) -> StatisticsSummary:
        """
        Compute the end-of-run figures.

        Args:
            completed: Passengers that reached their destination
            waiting: Passengers still waiting when the run stopped
            total_ticks: Status monitor ticks elapsed
            final_floor: Floor the car stopped at
        """
        completed = list(completed)
        waiting_count = len(list(waiting))

        if completed:
            waits = np.array([p.get_waiting_time() for p in completed], dtype=float)
            rides = np.array([p.get_riding_time() for p in completed], dtype=float)
            totals = np.array([p.get_total_time() for p in completed], dtype=float)
            average_wait = float(np.mean(waits))
            max_wait = float(np.max(waits))
            average_ride = float(np.mean(rides))
            average_total = float(np.mean(totals))
        else:
            average_wait = max_wait = average_ride = average_total = 0.0

        return StatisticsSummary(
            total_ticks=total_ticks,
            completed_count=len(completed),
            waiting_count=waiting_count,
            average_waiting_time=average_wait,
            max_waiting_time=max_wait,
            average_riding_time=average_ride,
            average_total_time=average_total,
            final_floor=final_floor,
        )

    def plot_trajectory_diagram(self, output_filename: str = 'elevator_trajectory_diagram.png',
                                min_floor: Optional[int] = None, max_floor: Optional[int] = None) -> Optional[str]:
        """
        Draw the car's floor over ticks and save it as an image.

        Returns:
            The file written, or None if nothing was recorded
        """
        trajectory = self.get_trajectory()
        if not trajectory:
            return None

        ticks = [sample[0] for sample in trajectory]
        floors = [sample[1] for sample in trajectory]
        onboard = [sample[3] for sample in trajectory]

        fig, ax = plt.subplots(figsize=(14, 8))
        ax.step(ticks, floors, where='post', label=self.elevator_id, linewidth=2.5, color='#1f77b4', alpha=0.8)

        # Mark ticks where the car carried passengers
        loaded_ticks = [t for t, n in zip(ticks, onboard) if n > 0]
        loaded_floors = [f for f, n in zip(floors, onboard) if n > 0]
        if loaded_ticks:
            ax.scatter(loaded_ticks, loaded_floors, s=25, color='#ff7f0e', label='occupied', zorder=3)

        ax.set_title("Elevator Trajectory Diagram")
        ax.set_xlabel("Tick")
        ax.set_ylabel("Floor")
        ax.grid(True, which='both', linestyle='--', alpha=0.7)

        low = min_floor if min_floor is not None else min(floors)
        high = max_floor if max_floor is not None else max(floors)
        ax.set_yticks(range(low, high + 1))
        ax.legend(loc='upper right', fontsize=10)

        fig.savefig(output_filename, dpi=150, bbox_inches='tight')
        plt.close(fig)
        return output_filename
