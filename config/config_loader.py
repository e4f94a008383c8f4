"""
Configuration loader utility

Reads and writes SimulationConfig as YAML, from files or strings.
"""

import yaml
from pathlib import Path
from typing import Union

from .simulation import SimulationConfig


class ConfigLoader:
    """Utility class for loading configuration files"""

    @staticmethod
    def loads_simulation(text: str) -> SimulationConfig:
        """
        Parse SimulationConfig from a YAML document

        An empty document yields the default configuration.

        Raises:
            ValueError: If the document is not a mapping or validation fails
        """
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Simulation config must be a mapping, got {type(data).__name__}")
        return SimulationConfig.from_dict(data)

    @staticmethod
    def dumps_simulation(config: SimulationConfig) -> str:
        """Render SimulationConfig as a YAML document"""
        return yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True)

    @staticmethod
    def load_simulation(file_path: Union[str, Path]) -> SimulationConfig:
        """
        Load SimulationConfig from YAML file

        Args:
            file_path: Path to YAML file

        Returns:
            SimulationConfig instance

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If validation fails
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")
        return ConfigLoader.loads_simulation(file_path.read_text(encoding='utf-8'))

    @staticmethod
    def save_simulation(config: SimulationConfig, file_path: Union[str, Path]):
        """Write SimulationConfig to a YAML file, creating parent directories"""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(ConfigLoader.dumps_simulation(config), encoding='utf-8')


# Convenience functions
def load_simulation_config(file_path: Union[str, Path]) -> SimulationConfig:
    """Load SimulationConfig from YAML file"""
    return ConfigLoader.load_simulation(file_path)


def save_simulation_config(config: SimulationConfig, file_path: Union[str, Path]):
    """Save SimulationConfig to YAML file"""
    ConfigLoader.save_simulation(config, file_path)
