import threading
from concurrent.futures import ThreadPoolExecutor, wait
from enum import Enum
from typing import Dict, List, Optional, Tuple

from analyzer.statistics import SimulationStatistics, StatisticsSummary
from config.simulation import SimulationConfig, TimingConfig
from simulator.core.direction import Direction
from simulator.core.elevator import Elevator, ElevatorSnapshot
from simulator.core.passenger import Passenger
from simulator.implementations.console.log_sink import ConsoleLogSink
from simulator.infrastructure.message_broker import MessageBroker
from simulator.infrastructure.realtime_env import RealtimeClock
from simulator.interfaces.listeners import ElevatorStateListener, WorkerStatus, WorkerStatusListener
from simulator.interfaces.log_sink import ILogSink

from .passenger_service import PassengerService
from .workers import MovementWorker, RequestWorker, SimulationWorker, StatusWorker


REQUEST_TOPIC = "passenger/request"


class SimulationState(Enum):
    IDLE = "IDLE"
    RUNNING = "RUNNING"
    STOPPED = "STOPPED"


class ElevatorService:
    """
    Dispatch engine for a single SCAN elevator.

    Three workers run on a thread pool against the shared Elevator and
    PassengerService:
      - request processor: drains the request channel into the car's stops
      - movement control: moves the car one floor per tick
      - status monitor: handles exits/boardings and ends the run when idle

    All reads and writes of the Elevator and PassengerService happen under
    one lock. Listeners are called after the lock is released and their
    exceptions are logged, never raised into the workers.

    The per-tick cycles (ingest_next_request, advance_car,
    service_current_floor) are public so a run can also be driven
    step by step from a single thread.
    """

    def __init__(self, min_floor: int, max_floor: int, capacity: int,
                 log_sink: Optional[ILogSink] = None,
                 timing: Optional[TimingConfig] = None,
                 elevator_id: str = "ELV-DEFAULT",
                 start_floor: Optional[int] = None):
        self.log_sink = log_sink if log_sink is not None else ConsoleLogSink()
        self.timing = timing if timing is not None else TimingConfig()

        self.elevator = Elevator(min_floor, max_floor, capacity, elevator_id, start_floor)
        self.passenger_service = PassengerService(self.log_sink)
        self.statistics = SimulationStatistics(elevator_id)
        self.broker = MessageBroker()
        self.clock = RealtimeClock(self.timing.speed_factor)

        self._lock = threading.RLock()
        self._running = False
        self._state = SimulationState.IDLE
        self.total_ticks = 0
        self.summary: Optional[StatisticsSummary] = None  # set when a run is stopped

        self._executor: Optional[ThreadPoolExecutor] = None
        self._workers: Dict[str, Tuple[SimulationWorker, object]] = {}  # name -> (worker, future)

        self._worker_status_listener: Optional[WorkerStatusListener] = None
        self._elevator_state_listener: Optional[ElevatorStateListener] = None

    @classmethod
    def from_config(cls, config: SimulationConfig, log_sink: Optional[ILogSink] = None) -> 'ElevatorService':
        """Build an engine from a validated SimulationConfig."""
        return cls(
            min_floor=config.building.min_floor,
            max_floor=config.building.max_floor,
            capacity=config.elevator.capacity,
            log_sink=log_sink,
            timing=config.timing,
            elevator_id=config.elevator.elevator_id,
            start_floor=config.elevator.start_floor,
        )

    # --- Listeners ---

    def set_worker_status_listener(self, listener: Optional[WorkerStatusListener]):
        self._worker_status_listener = listener

    def set_elevator_state_listener(self, listener: Optional[ElevatorStateListener]):
        self._elevator_state_listener = listener

    def _publish_worker_status(self, worker_name: str, status: WorkerStatus):
        listener = self._worker_status_listener
        if listener is None:
            return
        try:
            listener(worker_name, status)
        except Exception as e:
            self.log_sink.error(f"Worker status listener failed ({worker_name} -> {status}): {e!r}")

    def _notify_elevator_state(self):
        listener = self._elevator_state_listener
        if listener is None:
            return
        try:
            listener()
        except Exception as e:
            self.log_sink.error(f"Elevator state listener failed: {e!r}")

    # --- Requests ---

    def add_passenger_request(self, start_floor: int, destination_floor: int) -> Optional[Passenger]:
        """
        Submit one transport request.

        Invalid requests (same start and destination, or a floor outside the
        building) are logged at WARN and dropped.

        Returns:
            The queued Passenger, or None if the request was dropped
        """
        if start_floor == destination_floor:
            self.log_sink.warn(f"Request rejected: start and destination are both floor {start_floor}")
            return None
        if not (self.elevator.is_valid_floor(start_floor) and self.elevator.is_valid_floor(destination_floor)):
            self.log_sink.warn(
                f"Request rejected: {start_floor} -> {destination_floor} is outside floors "
                f"{self.elevator.min_floor}-{self.elevator.max_floor}"
            )
            return None

        # Queue and publish together so the status monitor never sees the
        # passenger without the channel token or the other way round.
        with self._lock:
            passenger = self.passenger_service.add_passenger_request(start_floor, destination_floor)
            self.broker.put(REQUEST_TOPIC, start_floor)

        self.log_sink.info(f"Request added: floor {start_floor} -> floor {destination_floor}")
        self._notify_elevator_state()
        return passenger

    # --- Per-tick cycles ---

    def ingest_next_request(self, timeout: Optional[float] = None) -> Optional[int]:
        """
        Take one floor from the request channel and add it to the car's stops.

        Returns:
            The floor taken, or None if the wait timed out or was interrupted
        """
        floor = self.broker.get(REQUEST_TOPIC, timeout=timeout)
        if floor is None:
            return None

        with self._lock:
            accepted = self.elevator.add_request(floor)

        if accepted:
            self.log_sink.info(f"Request processed: floor {floor}")
        else:
            self.log_sink.debug(f"Request for floor {floor} needs no new stop")
        self._notify_elevator_state()
        return floor

    def advance_car(self) -> bool:
        """
        Run one movement tick.

        Returns:
            True if the car has somewhere to be (moved or holding at a stop)
        """
        with self._lock:
            for floor in self.passenger_service.get_waiting_passenger_floors():
                self.elevator.add_request(floor)

            current_floor = self.elevator.current_floor
            if self.elevator.has_request_at(current_floor):
                self.log_sink.debug(f"Holding at floor {current_floor} for pending stop")
                active = True
            elif self._turn_for_waiting_passenger():
                active = True
            else:
                next_floor = self.elevator.next_destination()
                if next_floor is not None and next_floor != current_floor:
                    self._move_one_floor(next_floor)
                    active = True
                else:
                    self._handle_direction_change()
                    active = False

        self._notify_elevator_state()
        return active

    def _move_one_floor(self, target_floor: int):
        current_floor = self.elevator.current_floor
        step = 1 if target_floor > current_floor else -1
        self.elevator.set_direction(Direction.between(current_floor, target_floor))
        self.elevator.set_current_floor(current_floor + step)
        self.log_sink.info(
            f"Moving: floor {current_floor} -> floor {self.elevator.current_floor} "
            f"({self.elevator.direction}, target {target_floor})"
        )

    def _turn_for_waiting_passenger(self) -> bool:
        """
        Reverse in place for a passenger refused at the end of a sweep.

        When nothing lies ahead and someone at the current floor waits to
        travel the other way, the car turns and holds this tick so the
        status monitor can board them before it leaves.
        """
        elevator = self.elevator
        direction = elevator.direction
        if direction is Direction.IDLE or elevator.has_requests_in(direction):
            return False

        opposite = direction.opposite()
        if not self.passenger_service.has_waiting_passenger_at(elevator.current_floor, opposite):
            return False

        elevator.set_direction(opposite)
        self.log_sink.info(
            f"Direction change: {direction} -> {opposite} "
            f"(passenger waiting at floor {elevator.current_floor})"
        )
        return True

    def _handle_direction_change(self):
        """
        Decide the direction when there is no destination ahead.

        The car only goes IDLE once there are no stops and no waiting
        passengers.
        """
        elevator = self.elevator
        direction = elevator.direction

        if direction is not Direction.IDLE and elevator.has_requests_in(direction.opposite()):
            elevator.set_direction(direction.opposite())
            self.log_sink.info(f"Direction change: {direction} -> {elevator.direction}")
            return

        if not elevator.has_requests() and not self.passenger_service.has_waiting_passengers():
            if direction is not Direction.IDLE:
                elevator.stop()
                self.log_sink.info(f"All requests served, idle at floor {elevator.current_floor}")

    def service_current_floor(self) -> bool:
        """
        Run one status tick: exits, then boardings, then the idle check.

        Returns:
            True if the whole system is idle (the run ends here if it was running)
        """
        with self._lock:
            self.total_ticks += 1
            self.log_sink.debug(f"--- Tick {self.total_ticks} ---")

            self._process_exits()
            self._process_boarding()

            self.statistics.record_tick(
                self.total_ticks,
                self.elevator.current_floor,
                self.elevator.direction,
                self.elevator.passenger_count,
            )
            self.log_sink.debug(f"State: {self.elevator}")

            idle = self._is_system_idle()
            if idle and self._running:
                self._running = False
                self.log_sink.info("All requests served, simulation finished")
                self.clock.interrupt()
                self.broker.interrupt(REQUEST_TOPIC)

        self._notify_elevator_state()
        return idle

    def _process_exits(self):
        floor = self.elevator.current_floor
        if not self.elevator.has_request_at(floor):
            return

        exiting = self.passenger_service.get_exiting_passengers(self.elevator.current_passengers, floor)
        if exiting:
            self.log_sink.info(f"Arrived at floor {floor}, {len(exiting)} passenger(s) exiting")
            for passenger in exiting:
                self.passenger_service.process_passenger_exit(passenger)
            self.elevator.remove_passengers_at(floor)
            self.elevator.remove_request(floor)

    def _process_boarding(self):
        floor = self.elevator.current_floor
        boarding = self.passenger_service.get_boarding_passengers(
            floor, self.elevator.direction, self.elevator.available_capacity
        )

        if boarding:
            self.log_sink.info(f"Boarding at floor {floor}: {len(boarding)} passenger(s)")
            refused = []
            for passenger in boarding:
                if self.elevator.add_passenger(passenger):
                    self.passenger_service.process_passenger_boarding(passenger)
                else:
                    refused.append(passenger)
            if refused:
                self.passenger_service.return_to_queue(refused)
                self.log_sink.debug(f"{len(refused)} passenger(s) left waiting at floor {floor}")

        self.elevator.remove_request(floor)

    def _is_system_idle(self) -> bool:
        return (
            not self.elevator.has_requests()
            and not self.passenger_service.has_waiting_passengers()
            and self.broker.is_empty(REQUEST_TOPIC)
            and self.elevator.is_empty()
        )

    # --- Lifecycle ---

    def start_simulation(self):
        """
        Start the three workers. Does nothing if already running.

        A run that ended by itself is finalized first (workers collected,
        statistics printed), then a new run starts.
        """
        with self._lock:
            finished = self._state is SimulationState.RUNNING and not self._running
        if finished:
            self.stop_simulation()

        with self._lock:
            if self._state is SimulationState.RUNNING:
                return
            self._running = True
            self._state = SimulationState.RUNNING
            self.summary = None
            self.clock.reset()

        self.log_sink.info("=== SCAN elevator simulation started ===")
        self.log_sink.info(f"Initial state: {self.elevator}")

        workers = [RequestWorker(self), MovementWorker(self), StatusWorker(self)]
        for worker in workers:
            self._publish_worker_status(worker.name, worker.get_state())

        self._executor = ThreadPoolExecutor(max_workers=len(workers), thread_name_prefix=self.elevator.elevator_id)
        self._workers = {worker.name: (worker, self._executor.submit(worker.run)) for worker in workers}

    def stop_simulation(self):
        """
        Stop the workers and print the statistics.

        Workers get `timing.shutdown_grace` seconds to leave their loops;
        any still running after that are cancelled. Does nothing unless
        the simulation is running.
        """
        with self._lock:
            if self._state is not SimulationState.RUNNING:
                return
            self._state = SimulationState.STOPPED
            self._running = False

        self.clock.interrupt()
        self.broker.interrupt(REQUEST_TOPIC)
        self._shutdown_workers()

        self.log_sink.info("=== Simulation finished ===")
        self.summary = self.print_statistics()

    def _shutdown_workers(self):
        if self._executor is None:
            return

        futures = [future for _, future in self._workers.values()]
        _, not_done = wait(futures, timeout=self.timing.shutdown_grace)

        for worker, future in self._workers.values():
            if future in not_done:
                self.log_sink.error(
                    f"[{worker.name}] did not stop within {self.timing.shutdown_grace:.1f}s, cancelling"
                )
                future.cancel()
                worker.set_state(WorkerStatus.STOPPED)
            elif not future.cancelled() and future.exception() is not None:
                self.log_sink.error(f"[{worker.name}] ended with an error: {future.exception()!r}")

        self._executor.shutdown(wait=False, cancel_futures=True)
        self._executor = None

    def wait_for_completion(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the run ends by itself, then finalize it like stop_simulation().

        Args:
            timeout: Seconds to wait; None waits indefinitely

        Returns:
            True if the workers finished, False if the wait timed out
            (the simulation is left running)
        """
        futures = [future for _, future in self._workers.values()]
        if futures:
            _, not_done = wait(futures, timeout=timeout)
            if not_done:
                return False
        self.stop_simulation()
        return True

    def is_running(self) -> bool:
        return self._running

    @property
    def state(self) -> SimulationState:
        return self._state

    # --- Snapshots ---

    def get_elevator_snapshot(self) -> ElevatorSnapshot:
        with self._lock:
            return self.elevator.snapshot()

    def get_waiting_passengers(self) -> List[Passenger]:
        with self._lock:
            return self.passenger_service.get_waiting_passengers()

    def get_completed_passengers(self) -> List[Passenger]:
        with self._lock:
            return self.passenger_service.get_completed_passengers()

    def get_total_ticks(self) -> int:
        return self.total_ticks

    # --- Statistics ---

    def print_statistics(self) -> Optional[StatisticsSummary]:
        """
        Log the end-of-run report.

        Returns:
            The summary, or None if the simulation is still running
        """
        with self._lock:
            if self._running:
                self.log_sink.warn("Statistics are available once the simulation has stopped")
                return None
            summary = self.statistics.summarize(
                self.passenger_service.get_completed_passengers(),
                self.passenger_service.get_waiting_passengers(),
                self.total_ticks,
                self.elevator.current_floor,
            )

        self.log_sink.info("=== Simulation statistics ===")
        self.log_sink.info(f"Total ticks: {summary.total_ticks}")
        self.log_sink.info(f"Completed passengers: {summary.completed_count}")
        self.log_sink.info(f"Waiting passengers: {summary.waiting_count}")
        if summary.completed_count:
            self.log_sink.info(f"Average waiting time: {summary.average_waiting_time:.1f}s")
            self.log_sink.info(f"Average total time: {summary.average_total_time:.1f}s")
        self.log_sink.info(f"Final elevator floor: {summary.final_floor}")
        return summary
