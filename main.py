import argparse
import sys

# Configuration
from config import SimulationConfig, load_simulation_config

# Dispatch engine and logging
from controller import ElevatorService
from simulator.implementations import LogSinkFactory

DEFAULT_CONFIG_PATH = "scenarios/simulation/default.yaml"
# Wait this many ticks per floor of the building before giving up on self-termination
TICKS_PER_FLOOR_ALLOWANCE = 20


def run_simulation(sim_config_path=DEFAULT_CONFIG_PATH, plot_path=None):
    """
    Run one scenario file to completion.

    Args:
        sim_config_path: Path to simulation configuration YAML file
        plot_path: Where to save the trajectory diagram (optional)

    Returns:
        StatisticsSummary of the run
    """
    print("--- Loading Configuration ---")
    sim_config: SimulationConfig = load_simulation_config(sim_config_path)
    print(f"Simulation Config: {sim_config_path}")

    log_sink = LogSinkFactory.from_config(sim_config.logging)
    service = ElevatorService.from_config(sim_config, log_sink=log_sink)

    print("\n--- Submitting Requests ---")
    for start_floor, destination_floor in sim_config.scenario.requests:
        service.add_passenger_request(start_floor, destination_floor)

    print("\n--- Simulation Start ---")
    service.start_simulation()

    num_floors = sim_config.building.max_floor - sim_config.building.min_floor + 1
    timeout = (
        sim_config.timing.tick_interval / sim_config.timing.speed_factor
        * num_floors * TICKS_PER_FLOOR_ALLOWANCE
        * max(1, len(sim_config.scenario.requests))
    )
    try:
        if not service.wait_for_completion(timeout=timeout):
            log_sink.warn(f"Simulation did not finish within {timeout:.1f}s, stopping")
            service.stop_simulation()
    except KeyboardInterrupt:
        log_sink.warn("Interrupted, stopping")
        service.stop_simulation()

    summary = service.summary

    if plot_path:
        written = service.statistics.plot_trajectory_diagram(
            plot_path,
            min_floor=sim_config.building.min_floor,
            max_floor=sim_config.building.max_floor,
        )
        if written:
            print(f"\nTrajectory diagram saved: {written}")

    log_sink.close()
    return summary


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Single-car SCAN elevator simulation")
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG_PATH,
                        help="simulation configuration YAML file")
    parser.add_argument("--plot", metavar="PATH", default=None,
                        help="save the car's trajectory diagram to PATH")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        run_simulation(sim_config_path=args.config, plot_path=args.plot)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
