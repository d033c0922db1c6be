"""Base class for hyper-heuristics.

A hyper-heuristic owns its random number generator, time budget and
selection state. It drives a SightseeingDomain only through the domain's
public operations and never touches the solutions directly.
"""

import logging
import random
import time
from abc import ABC, abstractmethod
from typing import Hashable, List, Optional

from sightseeing.domain import SightseeingDomain
from sightseeing.exceptions import UninitializedSolution
from sightseeing.hyperheuristics.config import HyperHeuristicConfig

logger = logging.getLogger(__name__)


class HyperHeuristic(ABC):
    """Time-limited search over a problem domain."""

    name = "hyper-heuristic"

    def __init__(self, seed: int, config: Optional[HyperHeuristicConfig] = None):
        self.seed = seed
        self.rng = random.Random(seed)
        self.config = config or HyperHeuristicConfig()

        self.domain: Optional[SightseeingDomain] = None
        self.time_limit: Optional[float] = None
        self.iterations = 0
        self.selection_history: List[Hashable] = []
        self._start_time: Optional[float] = None

    def set_time_limit(self, seconds: float) -> None:
        if seconds <= 0:
            raise ValueError(f"Time limit must be positive, got {seconds}")
        self.time_limit = seconds

    def load_problem_domain(self, domain: SightseeingDomain) -> None:
        self.domain = domain

    def get_elapsed_time(self) -> float:
        """Seconds since run() started (0 before it starts)."""
        if self._start_time is None:
            return 0.0
        return time.perf_counter() - self._start_time

    def has_time_expired(self) -> bool:
        """Check the time budget and the optional iteration cap."""
        max_iterations = self.config.max_iterations
        if max_iterations is not None and self.iterations >= max_iterations:
            return True
        if self.time_limit is None:
            # Without a time limit only the iteration cap can stop the search
            return max_iterations is None
        return self.get_elapsed_time() >= self.time_limit

    def run(self) -> None:
        """Run the search on the loaded domain until the budget is exhausted."""
        if self.domain is None:
            raise UninitializedSolution("No problem domain loaded. Call load_problem_domain() first.")
        if self.time_limit is None and self.config.max_iterations is None:
            raise ValueError("Set a time limit or max_iterations before run()")

        self.iterations = 0
        self.selection_history = []
        self._start_time = time.perf_counter()

        logger.info(
            f"{self.name} started: seed={self.seed}, time_limit={self.time_limit}s, "
            f"max_iterations={self.config.max_iterations}"
        )

        self.solve(self.domain)

        logger.info(
            f"{self.name} finished: {self.iterations} iterations in {self.get_elapsed_time():.2f}s, "
            f"best={self.domain.get_best_solution_value()}"
        )

    def get_best_solution_value(self) -> int:
        if self.domain is None:
            raise UninitializedSolution("No problem domain loaded")
        return self.domain.get_best_solution_value()

    @abstractmethod
    def solve(self, domain: SightseeingDomain) -> None:
        """Search loop; must poll has_time_expired() once per iteration."""

    def __str__(self) -> str:
        return self.name
