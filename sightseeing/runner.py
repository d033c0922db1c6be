"""Run driver: seeded searches, repeated trials and their summary."""

import logging
from typing import Iterable, List, Optional

import pandas as pd
from pydantic import BaseModel, Field

from sightseeing.config import Config
from sightseeing.domain import SightseeingDomain
from sightseeing.hyperheuristics.base import HyperHeuristic
from sightseeing.hyperheuristics.config import HyperHeuristicConfig
from sightseeing.hyperheuristics.learning import LearningSelectionHyperHeuristic
from sightseeing.hyperheuristics.rl_ils import RLILSHyperHeuristic
from sightseeing.logger import SearchTraceLogger
from sightseeing.models.instance import Instance

logger = logging.getLogger(__name__)


HYPER_HEURISTICS = {
    LearningSelectionHyperHeuristic.name: LearningSelectionHyperHeuristic,
    RLILSHyperHeuristic.name: RLILSHyperHeuristic,
}


class RunResult(BaseModel):
    """Outcome of one seeded search run."""

    instance_name: str
    hyper_heuristic: str
    seed: int
    best_value: int = Field(..., description="Cost of the best route found")
    route: List[int] = Field(..., description="Best visiting order of the points of interest")
    route_text: str
    iterations: int
    elapsed_seconds: float
    heuristic_calls: List[int] = Field(default_factory=list)
    heuristic_call_times: List[float] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "instance_name": "square",
                "hyper_heuristic": "learning",
                "seed": 17032025,
                "best_value": 10,
                "route": [0, 1, 2],
                "route_text": "(0,0) - (1,1) - (2,2) - (3,3) - (4,4)",
                "iterations": 1000,
                "elapsed_seconds": 0.5,
                "heuristic_calls": [120, 130, 110, 20, 25, 18, 140, 130],
                "heuristic_call_times": [0.01, 0.01, 0.01, 0.05, 0.06, 0.04, 0.02, 0.02],
            }
        }
    }


def create_hyper_heuristic(
    name: str,
    seed: int,
    hh_config: Optional[HyperHeuristicConfig] = None,
    trace_logger: Optional[SearchTraceLogger] = None,
) -> HyperHeuristic:
    if name not in HYPER_HEURISTICS:
        raise ValueError(f"Unknown hyper-heuristic '{name}', expected one of {sorted(HYPER_HEURISTICS)}")
    return HYPER_HEURISTICS[name](seed, hh_config, trace_logger=trace_logger)


def run_search(
    instance: Instance,
    seed: int,
    hyper_heuristic: str = "learning",
    time_limit: Optional[float] = None,
    hh_config: Optional[HyperHeuristicConfig] = None,
    config: Optional[Config] = None,
    trace_logger: Optional[SearchTraceLogger] = None,
) -> RunResult:
    """
    Run one seeded search on an instance.

    Args:
        instance: Instance to solve
        seed: Seed for both the domain and the hyper-heuristic
        hyper_heuristic: "learning" or "rl-ils"
        time_limit: Time budget in seconds (config.TIME_LIMIT_SECONDS if None)
        hh_config: Hyper-heuristic tuning constants
        config: Application configuration
        trace_logger: Optional per-iteration JSON lines trace

    Returns:
        RunResult with the best route and heuristic statistics
    """
    config = config or Config()
    if time_limit is None:
        time_limit = config.TIME_LIMIT_SECONDS

    domain = SightseeingDomain(seed, config=config)
    domain.load_instance(instance)

    search = create_hyper_heuristic(hyper_heuristic, seed, hh_config, trace_logger)
    search.set_time_limit(time_limit)
    search.load_problem_domain(domain)
    search.run()

    best = domain.get_best_solution()
    result = RunResult(
        instance_name=instance.name,
        hyper_heuristic=search.name,
        seed=seed,
        best_value=best.objective_value,
        route=list(best.route),
        route_text=domain.best_solution_to_string(),
        iterations=search.iterations,
        elapsed_seconds=search.get_elapsed_time(),
        heuristic_calls=domain.get_heuristic_call_record(),
        heuristic_call_times=domain.get_heuristic_call_time_record(),
    )

    logger.info(
        f"{instance.name} [{search.name}] seed={seed}: best={result.best_value} "
        f"after {result.iterations} iterations"
    )
    return result


def run_trials(instance: Instance, seeds: Iterable[int], **kwargs) -> List[RunResult]:
    """Run one search per seed, one after another."""
    results = []
    for trial, seed in enumerate(seeds, start=1):
        logger.info(f"Trial {trial}: seed={seed}")
        results.append(run_search(instance, seed, **kwargs))
    return results


def summarize_trials(results: List[RunResult]) -> pd.DataFrame:
    """
    Summarise trial results per instance and hyper-heuristic.

    Returns:
        DataFrame indexed by (instance_name, hyper_heuristic) with the number of
        runs, min / mean / std / max best cost and mean iterations
    """
    columns = ["runs", "min_cost", "mean_cost", "std_cost", "max_cost", "mean_iterations"]
    if not results:
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame([result.model_dump() for result in results])
    summary = df.groupby(["instance_name", "hyper_heuristic"]).agg(
        runs=("seed", "count"),
        min_cost=("best_value", "min"),
        mean_cost=("best_value", "mean"),
        std_cost=("best_value", "std"),
        max_cost=("best_value", "max"),
        mean_iterations=("iterations", "mean"),
    )
    return summary
