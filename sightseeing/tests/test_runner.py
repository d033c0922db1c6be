"""Tests for the run driver, reports and command line entry point."""

import json
import random

import pytest

from sightseeing.config import Config
from sightseeing.hyperheuristics import HyperHeuristicConfig
from sightseeing.logger import generate_final_report
from sightseeing.main import main
from sightseeing.models import Instance, Location
from sightseeing.runner import RunResult, run_search, run_trials, summarize_trials


VALID_INSTANCE = """NAME: square
COMMENT: four corners of a square
HOTEL_LOCATION
0 0
AIRPORT_LOCATION
10 0
POINTS_OF_INTEREST
0 10
10 10
5 5
EOF
"""


@pytest.fixture
def sample_instance():
    """Create a random 15-location instance."""
    rng = random.Random(15)
    return Instance(
        name="sample",
        hotel=Location(x=0, y=0),
        airport=Location(x=50, y=50),
        locations=[Location(x=rng.randint(0, 50), y=rng.randint(0, 50)) for _ in range(15)],
    )


@pytest.fixture
def quick_config():
    """Create a hyper-heuristic config capped at 100 iterations."""
    return HyperHeuristicConfig(max_iterations=100)


def test_run_search(sample_instance, quick_config):
    """Test one seeded run returns a complete RunResult."""
    result = run_search(sample_instance, seed=7, time_limit=30, hh_config=quick_config, config=Config())

    assert isinstance(result, RunResult)
    assert result.instance_name == "sample"
    assert result.hyper_heuristic == "learning"
    assert result.iterations == 100
    assert sorted(result.route) == list(range(15))
    assert result.route_text.startswith("(0,0)")
    assert len(result.heuristic_calls) == 8


def test_run_search_is_reproducible(sample_instance, quick_config):
    """Test the same seed gives the same route and cost."""
    first = run_search(sample_instance, 11, "rl-ils", 30, quick_config, Config())
    second = run_search(sample_instance, 11, "rl-ils", 30, quick_config, Config())

    assert first.best_value == second.best_value
    assert first.route == second.route


def test_unknown_hyper_heuristic(sample_instance):
    """Test an unknown hyper-heuristic name is rejected."""
    with pytest.raises(ValueError):
        run_search(sample_instance, 1, "annealing", config=Config())


def test_run_trials_and_summary(sample_instance, quick_config):
    """Test trials run per seed and are summarised with pandas."""
    results = run_trials(sample_instance, [1, 2, 3], time_limit=30, hh_config=quick_config, config=Config())
    results += run_trials(
        sample_instance, [1, 2], hyper_heuristic="rl-ils", time_limit=30,
        hh_config=quick_config, config=Config(),
    )

    assert [result.seed for result in results] == [1, 2, 3, 1, 2]

    summary = summarize_trials(results)
    learning = summary.loc[("sample", "learning")]
    assert learning["runs"] == 3
    assert learning["min_cost"] == min(r.best_value for r in results[:3])
    assert learning["min_cost"] <= learning["mean_cost"] <= learning["max_cost"]
    assert learning["mean_iterations"] == 100
    assert summary.loc[("sample", "rl-ils")]["runs"] == 2


def test_summary_of_no_trials():
    """Test an empty result list gives an empty summary."""
    assert summarize_trials([]).empty


def test_generate_final_report(sample_instance, quick_config, tmp_path):
    """Test JSON and text reports are written."""
    results = run_trials(sample_instance, [4, 5], time_limit=30, hh_config=quick_config, config=Config())
    generate_final_report([result.model_dump() for result in results], str(tmp_path / "report"))

    report = json.loads((tmp_path / "report.json").read_text())
    assert report["summary"]["total_runs"] == 2
    assert report["summary"]["best_value"] == min(r.best_value for r in results)

    text = (tmp_path / "report.txt").read_text()
    assert "SEARCH FINAL REPORT" in text
    assert "Best Route" in text


def test_main_runs_instance_file(tmp_path, monkeypatch, capsys):
    """Test the command line runs a search and writes a report."""
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "search.log"))
    instance_path = tmp_path / "square.ssp"
    instance_path.write_text(VALID_INSTANCE)

    exit_code = main([
        str(instance_path), "--time-limit", "0.2", "--seed", "3", "--trials", "2", "--preset", "fast",
        "--report", str(tmp_path / "out"),
    ])

    assert exit_code == 0
    output = capsys.readouterr().out
    assert "Instance: square" in output
    assert "Route: (0,0)" in output
    assert (tmp_path / "out.json").exists()


def test_main_reports_malformed_instance(tmp_path, monkeypatch):
    """Test the command line exits non-zero on a malformed instance."""
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "search.log"))
    instance_path = tmp_path / "broken.ssp"
    instance_path.write_text(VALID_INSTANCE.replace("HOTEL_LOCATION", "HOTEL"))

    assert main([str(instance_path)]) == 1
    assert main([str(tmp_path / "missing.ssp")]) == 1


@pytest.mark.parametrize("time_limit", ["0", "-5"])
def test_main_rejects_non_positive_time_limit(tmp_path, monkeypatch, time_limit):
    """Test a non-positive --time-limit is a usage error, not a traceback."""
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "search.log"))
    instance_path = tmp_path / "square.ssp"
    instance_path.write_text(VALID_INSTANCE)

    with pytest.raises(SystemExit) as exc_info:
        main([str(instance_path), "--time-limit", time_limit])
    assert exc_info.value.code == 2


def test_main_reports_non_positive_configured_time_limit(tmp_path, monkeypatch):
    """Test a non-positive TIME_LIMIT_SECONDS from the environment exits with code 1."""
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "search.log"))
    monkeypatch.setenv("TIME_LIMIT_SECONDS", "0")
    instance_path = tmp_path / "square.ssp"
    instance_path.write_text(VALID_INSTANCE)

    assert main([str(instance_path)]) == 1
