"""
Worker activities of the dispatch engine.

Each worker is an Entity whose run() loops while the engine is running.
State changes are published to the engine's worker-status listener.
"""

from simulator.core.entity import Entity
from simulator.interfaces.listeners import WorkerStatus


REQUEST_WORKER = "Request Processor"
MOVEMENT_WORKER = "Movement Control"
STATUS_WORKER = "Status Monitor"


class SimulationWorker(Entity):
    """
    Base class for the engine's workers.

    Subclasses implement step(); it returns True when the worker should
    leave its loop early (its wait was interrupted by a stop request).
    """

    def __init__(self, name: str, engine):
        super().__init__(name, engine.log_sink)
        self.engine = engine

    def _on_state_changed(self, old_state: WorkerStatus, new_state: WorkerStatus):
        super()._on_state_changed(old_state, new_state)
        self.engine._publish_worker_status(self.name, new_state)

    def run(self):
        self.set_state(WorkerStatus.RUNNING)
        self.log_sink.info(f"[{self.name}] worker started.")
        try:
            while self.engine.is_running():
                if self.step():
                    self.log_sink.debug(f"[{self.name}] wait interrupted by stop request.")
                    break
        except Exception as e:
            self.log_sink.error(f"[{self.name}] worker failed: {e!r}")
            raise
        finally:
            self.set_state(WorkerStatus.STOPPED)
            self.log_sink.info(f"[{self.name}] worker stopped.")

    def step(self) -> bool:
        raise NotImplementedError


class RequestWorker(SimulationWorker):
    """Drains the inbound request channel into the car's request set"""

    def __init__(self, engine):
        super().__init__(REQUEST_WORKER, engine)

    def step(self) -> bool:
        floor = self.engine.ingest_next_request(self.engine.timing.poll_timeout)
        self.set_state(WorkerStatus.RUNNING if floor is not None else WorkerStatus.WAITING)
        return False


class MovementWorker(SimulationWorker):
    """Moves the car at most one floor per tick under SCAN"""

    def __init__(self, engine):
        super().__init__(MOVEMENT_WORKER, engine)

    def step(self) -> bool:
        active = self.engine.advance_car()
        self.set_state(WorkerStatus.RUNNING if active else WorkerStatus.WAITING)
        return self.engine.clock.sleep(self.engine.timing.tick_interval)


class StatusWorker(SimulationWorker):
    """Handles exits and boardings at the current floor and detects the end of the run"""

    def __init__(self, engine):
        super().__init__(STATUS_WORKER, engine)

    def step(self) -> bool:
        self.engine.service_current_floor()
        return self.engine.clock.sleep(self.engine.timing.tick_interval)
