"""Logging and reporting module."""

import json
import logging
import logging.handlers
from pathlib import Path
from typing import Dict, List, Optional
from datetime import datetime
from sightseeing.utils import format_cost


def configure_logging(level: str = "INFO", log_file: Optional[str] = "search.log") -> None:
    """
    Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file (None logs to the console only)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


class SearchTraceLogger:
    """JSON-lines trace of a search run, one entry per traced iteration."""

    def __init__(self, log_file: str = "trace.jsonl", every: int = 1):
        """
        Initialize trace logger.

        Args:
            log_file: Path to JSON lines file
            every: Only iterations that are a multiple of this are written
        """
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.every = max(1, every)
        self.file_handle = open(self.log_file, "a")

    def log_iteration(
        self,
        iteration: int,
        heuristic: str,
        current_value: int,
        candidate_value: int,
        best_value: int,
        accepted: bool,
        reward: float,
        scores: Dict,
    ) -> None:
        """
        Log one search iteration in JSON format.

        Args:
            iteration: Iteration number
            heuristic: Selected heuristic (name or pair of names)
            current_value: Cost of the current solution before the move
            candidate_value: Cost of the candidate solution
            best_value: Best cost found so far
            accepted: Whether the candidate replaced the current solution
            reward: Reward credited to the heuristic
            scores: Score table snapshot
        """
        if iteration % self.every != 0:
            return

        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "iteration": iteration,
            "heuristic": heuristic,
            "current": current_value,
            "candidate": candidate_value,
            "best": best_value,
            "accepted": accepted,
            "reward": reward,
            "scores": {str(key): value for key, value in scores.items()},
        }

        json.dump(log_entry, self.file_handle)
        self.file_handle.write("\n")
        self.file_handle.flush()

    def close(self) -> None:
        """Close log file."""
        self.file_handle.close()

    def __enter__(self) -> "SearchTraceLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def generate_final_report(results: List[Dict], output_path: str) -> None:
    """
    Generate final report from run results.

    Args:
        results: List of run result dicts (see RunResult)
        output_path: Path to output file (suffix is replaced by .json / .txt)
    """
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    best_values = [entry["best_value"] for entry in results]
    best_run = min(results, key=lambda entry: entry["best_value"]) if results else None

    # Generate report
    report = {
        "summary": {
            "total_runs": len(results),
            "best_value": min(best_values) if best_values else None,
            "mean_value": sum(best_values) / len(best_values) if best_values else None,
            "worst_value": max(best_values) if best_values else None,
            "best_seed": best_run["seed"] if best_run else None,
        },
        "runs": results,
    }

    # Write JSON report
    json_path = output_file.with_suffix(".json")
    with open(json_path, "w") as f:
        json.dump(report, f, indent=2)

    # Write text summary
    text_path = output_file.with_suffix(".txt")
    with open(text_path, "w") as f:
        f.write("=" * 80 + "\n")
        f.write("SEARCH FINAL REPORT\n")
        f.write("=" * 80 + "\n\n")
        f.write(f"Total Runs: {len(results)}\n")
        if best_run:
            summary = report["summary"]
            f.write(f"Best Cost: {format_cost(summary['best_value'])}\n")
            f.write(f"Mean Cost: {format_cost(summary['mean_value'])}\n")
            f.write(f"Worst Cost: {format_cost(summary['worst_value'])}\n\n")
            f.write("Runs:\n")
            for entry in results:
                f.write(
                    f"  seed={entry['seed']} hh={entry['hyper_heuristic']} "
                    f"cost={format_cost(entry['best_value'])} iterations={entry['iterations']}\n"
                )
            f.write(f"\nBest Route (seed {best_run['seed']}):\n  {best_run['route_text']}\n")
        f.write("\n" + "=" * 80 + "\n")

    logging.info(f"Final report generated: {json_path} and {text_path}")
