"""
Command-line entry point
"""

import yaml

import main


def _write_config(path, requests, log_file):
    path.write_text(yaml.safe_dump({
        "simulation": {
            "building": {"min_floor": 1, "max_floor": 6},
            "elevator": {"capacity": 4},
            "timing": {"tick_interval": 0.01, "poll_timeout": 0.01},
            "logging": {"sink": "file", "level": "DEBUG", "file_path": str(log_file)},
            "scenario": {"requests": requests},
        }
    }), encoding="utf-8")


def test_run_simulation_completes_scenario(tmp_path):
    config_path = tmp_path / "sim.yaml"
    log_file = tmp_path / "run.log"
    plot_path = tmp_path / "plot.png"
    _write_config(config_path, [[2, 5], [6, 1]], log_file)

    summary = main.run_simulation(str(config_path), plot_path=str(plot_path))

    assert summary.completed_count == 2
    assert summary.waiting_count == 0
    assert plot_path.exists()
    assert "Simulation statistics" in log_file.read_text(encoding="utf-8")


def test_main_reports_missing_config(tmp_path, capsys):
    assert main.main([str(tmp_path / "missing.yaml")]) == 1
    assert "Config file not found" in capsys.readouterr().err


def test_parse_args_defaults():
    args = main.parse_args([])
    assert args.config == main.DEFAULT_CONFIG_PATH
    assert args.plot is None
