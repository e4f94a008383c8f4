"""
Observer hooks consumed by presentation layers.

Both listeners are plain callables. The engine holds at most one of each,
calls them outside its lock and logs (never propagates) their failures.
"""

from enum import Enum
from typing import Callable


class WorkerStatus(Enum):
    """Phase of one of the engine's worker threads"""
    STARTING = "STARTING"
    RUNNING = "RUNNING"
    WAITING = "WAITING"
    STOPPED = "STOPPED"

    def __str__(self):
        return self.value


# (worker_name, status) -> None, called on every worker phase change
WorkerStatusListener = Callable[[str, WorkerStatus], None]

# () -> None, called after every mutation cycle so a view can re-render
ElevatorStateListener = Callable[[], None]
