import itertools
from abc import ABC, abstractmethod
from typing import Optional

from ..interfaces.listeners import WorkerStatus
from ..interfaces.log_sink import ILogSink


class Entity(ABC):
    """
    Abstract base class for the named, stateful activities of the simulation.

    An entity owns a state value and a run() body. The body is executed on a
    worker thread by whoever schedules it; Entity itself does not start
    threads. State transitions are logged and reported through the
    _on_state_changed hook, but only when the state actually changes.
    """
    # Entity ID counter shared across all class instances
    _entity_id_counter = itertools.count()

    def __init__(self, name: Optional[str] = None, log_sink: Optional[ILogSink] = None):
        """
        Initialize the entity.

        Args:
            name: Entity name. If not specified, auto-generated from class name and ID.
            log_sink: Where state transitions are logged (optional)
        """
        self.entity_id: int = next(self._entity_id_counter)
        self.name: str = name if name is not None else f"{self.__class__.__name__}_{self.entity_id}"
        self.log_sink = log_sink
        self.state: WorkerStatus = WorkerStatus.STARTING

    @abstractmethod
    def run(self):
        """
        Main body of the entity (abstract method).

        Typically a loop that runs until the owner signals a stop, and that
        leaves the entity in a terminal state on exit.
        """
        pass

    # --- Common utility methods ---

    def set_state(self, new_state: WorkerStatus):
        """
        Transition the entity's state.

        Args:
            new_state: Target state for the transition.
        """
        if self.state != new_state:
            old_state = self.state
            self.state = new_state
            self._on_state_changed(old_state, new_state)

    def get_state(self) -> WorkerStatus:
        return self.state

    def _on_state_changed(self, old_state: WorkerStatus, new_state: WorkerStatus):
        """
        Hook method called when state changes.
        Subclasses extend it to notify observers.
        """
        self._log_state_change(old_state, new_state)

    def _log_state_change(self, old_state: WorkerStatus, new_state: WorkerStatus):
        if self.log_sink is not None:
            self.log_sink.debug(
                f'[{self.name}] ({self.__class__.__name__}, ID:{self.entity_id}) '
                f'state transition: {old_state} -> {new_state}'
            )
