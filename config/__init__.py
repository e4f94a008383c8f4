"""
Configuration management package

Provides configuration classes for the simulation.
"""

from .simulation import (
    SimulationConfig,
    BuildingConfig,
    ElevatorConfig,
    TimingConfig,
    LoggingConfig,
    ScenarioConfig
)

from .config_loader import (
    ConfigLoader,
    load_simulation_config,
    save_simulation_config
)

__all__ = [
    # Simulation
    'SimulationConfig',
    'BuildingConfig',
    'ElevatorConfig',
    'TimingConfig',
    'LoggingConfig',
    'ScenarioConfig',

    # Loader
    'ConfigLoader',
    'load_simulation_config',
    'save_simulation_config',
]
