"""
Simulation Configuration

Building bounds, car specification, tick timing, logging and the
scenario of requests to submit.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


LOG_SINKS = ("console", "file", "stdlib")
LOG_LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


@dataclass
class BuildingConfig:
    """Floors served by the car"""
    min_floor: int = 1
    max_floor: int = 10

    def __post_init__(self):
        if self.min_floor >= self.max_floor:
            raise ValueError("min_floor must be lower than max_floor")


@dataclass
class ElevatorConfig:
    """Elevator specifications"""
    elevator_id: str = "ELV-DEFAULT"
    capacity: int = 5  # persons
    start_floor: Optional[int] = None  # None = building.min_floor

    def __post_init__(self):
        if not self.elevator_id:
            raise ValueError("elevator_id cannot be empty")
        if self.capacity < 1:
            raise ValueError("capacity must be at least 1")


@dataclass
class TimingConfig:
    """Worker pacing (seconds)"""
    tick_interval: float = 0.5  # movement / status worker period
    poll_timeout: float = 0.1  # request worker's bounded wait on its channel
    shutdown_grace: float = 1.0  # wait for workers on stop before forcing
    speed_factor: float = 1.0  # 2.0 = ticks twice as fast

    def __post_init__(self):
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        if self.poll_timeout <= 0:
            raise ValueError("poll_timeout must be positive")
        if self.shutdown_grace <= 0:
            raise ValueError("shutdown_grace must be positive")
        if self.speed_factor <= 0:
            raise ValueError("speed_factor must be positive")


@dataclass
class LoggingConfig:
    """Log sink selection"""
    sink: str = "console"  # console, file, stdlib
    level: str = "INFO"
    file_path: Optional[str] = None
    logger_name: str = "elevator"

    def __post_init__(self):
        self.level = str(self.level).upper()
        if self.level == "WARNING":
            self.level = "WARN"
        if self.sink not in LOG_SINKS:
            raise ValueError(f"sink must be one of {LOG_SINKS}")
        if self.level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {LOG_LEVELS}")
        if self.sink == "file" and not self.file_path:
            raise ValueError("file_path is required for the file sink")


@dataclass
class ScenarioConfig:
    """Requests submitted before the simulation starts"""
    requests: List[Tuple[int, int]] = field(default_factory=list)

    def __post_init__(self):
        normalized = []
        for request in self.requests:
            if len(request) != 2:
                raise ValueError(f"request must be [start_floor, destination_floor], got {request}")
            normalized.append((int(request[0]), int(request[1])))
        self.requests = normalized


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines building, elevator, timing, logging and scenario settings.
    """
    building: BuildingConfig = field(default_factory=BuildingConfig)
    elevator: ElevatorConfig = field(default_factory=ElevatorConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    scenario: ScenarioConfig = field(default_factory=ScenarioConfig)

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = (data or {}).get('simulation', data or {})

        building_data = sim_data.get('building', {})
        building = BuildingConfig(
            min_floor=building_data.get('min_floor', 1),
            max_floor=building_data.get('max_floor', 10)
        )

        elevator_data = sim_data.get('elevator', {})
        elevator = ElevatorConfig(
            elevator_id=elevator_data.get('elevator_id', 'ELV-DEFAULT'),
            capacity=elevator_data.get('capacity', 5),
            start_floor=elevator_data.get('start_floor')
        )

        timing_data = sim_data.get('timing', {})
        timing = TimingConfig(
            tick_interval=timing_data.get('tick_interval', 0.5),
            poll_timeout=timing_data.get('poll_timeout', 0.1),
            shutdown_grace=timing_data.get('shutdown_grace', 1.0),
            speed_factor=timing_data.get('speed_factor', 1.0)
        )

        logging_data = sim_data.get('logging', {})
        logging_config = LoggingConfig(
            sink=logging_data.get('sink', 'console'),
            level=logging_data.get('level', 'INFO'),
            file_path=logging_data.get('file_path'),
            logger_name=logging_data.get('logger_name', 'elevator')
        )

        scenario_data = sim_data.get('scenario', {})
        scenario = ScenarioConfig(
            requests=[tuple(r) for r in scenario_data.get('requests', [])]
        )

        config = cls(
            building=building,
            elevator=elevator,
            timing=timing,
            logging=logging_config,
            scenario=scenario
        )
        config.validate()
        return config

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        result = {
            'simulation': {
                'building': {
                    'min_floor': self.building.min_floor,
                    'max_floor': self.building.max_floor
                },
                'elevator': {
                    'elevator_id': self.elevator.elevator_id,
                    'capacity': self.elevator.capacity
                },
                'timing': {
                    'tick_interval': self.timing.tick_interval,
                    'poll_timeout': self.timing.poll_timeout,
                    'shutdown_grace': self.timing.shutdown_grace,
                    'speed_factor': self.timing.speed_factor
                },
                'logging': {
                    'sink': self.logging.sink,
                    'level': self.logging.level,
                    'logger_name': self.logging.logger_name
                },
                'scenario': {
                    'requests': [list(r) for r in self.scenario.requests]
                }
            }
        }

        if self.elevator.start_floor is not None:
            result['simulation']['elevator']['start_floor'] = self.elevator.start_floor
        if self.logging.file_path is not None:
            result['simulation']['logging']['file_path'] = self.logging.file_path

        return result

    def validate(self):
        """Validate configuration consistency"""
        start_floor = self.elevator.start_floor
        if start_floor is not None and not (self.building.min_floor <= start_floor <= self.building.max_floor):
            raise ValueError(
                f"elevator.start_floor ({start_floor}) must be between "
                f"{self.building.min_floor} and {self.building.max_floor}"
            )
