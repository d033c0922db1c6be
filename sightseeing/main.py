"""Command line entry point.

Usage:
    python -m sightseeing.main INSTANCE [--time-limit S] [--seed N]
        [--hh learning|rl-ils] [--preset default|fast|thorough]
        [--trials K] [--report PATH]

INSTANCE is a path, a file name under INSTANCE_DIR, or a benchmark
instance id (see config.INSTANCE_FILES).
"""

import argparse
import logging
import sys
from typing import List, Optional

from sightseeing.config import Config
from sightseeing.data_loader import load_instance, load_instance_by_id
from sightseeing.exceptions import SightseeingError
from sightseeing.hyperheuristics.config import FAST_CONFIG, THOROUGH_CONFIG, HyperHeuristicConfig
from sightseeing.logger import SearchTraceLogger, configure_logging, generate_final_report
from sightseeing.models.instance import Instance
from sightseeing.runner import HYPER_HEURISTICS, run_trials, summarize_trials
from sightseeing.utils import format_cost

logger = logging.getLogger(__name__)


PRESETS = {
    "default": HyperHeuristicConfig(),
    "fast": FAST_CONFIG,
    "thorough": THOROUGH_CONFIG,
}


def positive_float(value: str) -> float:
    """argparse type for strictly positive numbers."""
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sightseeing route hyper-heuristic search")
    parser.add_argument("instance", type=str,
                        help="Instance path, file name or benchmark id")
    parser.add_argument("--time-limit", type=positive_float, default=config.TIME_LIMIT_SECONDS,
                        help="Time limit per run in seconds")
    parser.add_argument("--seed", type=int, default=config.SEED,
                        help="Seed of the first run (later trials use seed+1, seed+2, ...)")
    parser.add_argument("--hh", choices=sorted(HYPER_HEURISTICS), default="learning",
                        help="Hyper-heuristic to run")
    parser.add_argument("--preset", choices=sorted(PRESETS), default="default",
                        help="Hyper-heuristic tuning preset")
    parser.add_argument("--trials", type=int, default=1,
                        help="Number of seeded runs")
    parser.add_argument("--report", type=str, default=None,
                        help="Write .json and .txt reports to this path")
    return parser


def resolve_instance(argument: str, config: Config) -> Instance:
    if argument.isdigit():
        return load_instance_by_id(int(argument), config.INSTANCE_DIR)
    return load_instance(argument, config.INSTANCE_DIR)


def main(argv: Optional[List[str]] = None) -> int:
    config = Config()
    args = build_parser(config).parse_args(argv)

    configure_logging(config.LOG_LEVEL, config.LOG_FILE)

    trace_logger = None
    try:
        instance = resolve_instance(args.instance, config)

        if config.TRACE_FILE:
            trace_logger = SearchTraceLogger(config.TRACE_FILE, config.TRACE_EVERY)

        seeds = [args.seed + offset for offset in range(max(1, args.trials))]
        results = run_trials(
            instance,
            seeds,
            hyper_heuristic=args.hh,
            hh_config=PRESETS[args.preset],
            time_limit=args.time_limit,
            config=config,
            trace_logger=trace_logger,
        )
    except (SightseeingError, FileNotFoundError, ValueError) as e:
        details = getattr(e, "details", {})
        logger.error(f"Search failed: {e} {details if details else ''}")
        return 1
    finally:
        if trace_logger is not None:
            trace_logger.close()

    best = min(results, key=lambda result: result.best_value)
    print(f"Instance: {instance.name}")
    print(f"Best cost: {format_cost(best.best_value)} (seed {best.seed})")
    print(f"Route: {best.route_text}")

    if len(results) > 1:
        print(summarize_trials(results).to_string())

    if args.report:
        generate_final_report([result.model_dump() for result in results], args.report)

    return 0


if __name__ == "__main__":
    sys.exit(main())
