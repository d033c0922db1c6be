"""Sightseeing problem domain.

Owns the loaded instance, the solution memory and the low-level heuristics,
and exposes the operations a hyper-heuristic drives: initialising, copying,
comparing and evaluating memory slots, and applying heuristics from one slot
into another. The domain never calls back into the hyper-heuristic.

Solutions are always copied between slots, never shared, so applying a
heuristic into one slot cannot change any other slot or the best solution.
"""

import logging
import random
import time
from typing import List, Optional, Sequence

from sightseeing.config import Config, MIN_MEMORY_SIZE
from sightseeing.exceptions import InvalidIndex, UninitializedSolution
from sightseeing.heuristics.registry import default_heuristics
from sightseeing.heuristics.types import HeuristicDescriptor, HeuristicType
from sightseeing.initialization import InitialisationMode, create_solution
from sightseeing.models.instance import Instance
from sightseeing.models.location import Location
from sightseeing.models.solution import Solution
from sightseeing.objective import ObjectiveFunction
from sightseeing.utils import format_route
from sightseeing.validator import check_permutation

logger = logging.getLogger(__name__)


def _clamp_parameter(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


class SightseeingDomain:
    """Problem domain for the hotel -> points of interest -> airport route."""

    def __init__(
        self,
        seed: int,
        heuristics: Optional[Sequence[HeuristicDescriptor]] = None,
        config: Optional[Config] = None,
    ):
        """
        Initialize the problem domain.

        Args:
            seed: Seed for the domain's random number generator
            heuristics: Low-level heuristics, indexed by position (default catalogue if None)
            config: Configuration object with heuristic parameters and debug flag
        """
        config = config or Config()

        self.seed = seed
        self.rng = random.Random(seed)
        self.heuristics: List[HeuristicDescriptor] = (
            list(heuristics) if heuristics is not None else default_heuristics()
        )

        self.instance: Optional[Instance] = None
        self.objective: Optional[ObjectiveFunction] = None

        self.depth_of_search = _clamp_parameter(config.DEPTH_OF_SEARCH)
        self.intensity_of_mutation = _clamp_parameter(config.INTENSITY_OF_MUTATION)
        self.initialisation_mode = InitialisationMode(config.INITIALISATION_MODE)
        self.debug_checks = config.DEBUG_CHECKS

        self._memory: List[Optional[Solution]] = [None] * MIN_MEMORY_SIZE
        self._best: Optional[Solution] = None
        self._call_record = [0] * len(self.heuristics)
        self._call_time_record = [0.0] * len(self.heuristics)

    # ------------------------------------------------------------------
    # Instance and memory management
    # ------------------------------------------------------------------

    def load_instance(self, instance: Instance) -> None:
        """Load an instance, clearing the solution memory and the best solution."""
        self.instance = instance
        self.objective = ObjectiveFunction(instance)
        self._memory = [None] * len(self._memory)
        self._best = None
        logger.info(
            f"Loaded instance '{instance.name}' with {instance.number_of_locations} points of interest"
        )

    def set_memory_size(self, size: int) -> None:
        """Resize the solution memory, keeping solutions in surviving slots."""
        if size < MIN_MEMORY_SIZE:
            raise ValueError(f"Memory size must be at least {MIN_MEMORY_SIZE}, got {size}")

        memory: List[Optional[Solution]] = [None] * size
        for index, solution in enumerate(self._memory[:size]):
            memory[index] = solution
        self._memory = memory

    @property
    def memory_size(self) -> int:
        return len(self._memory)

    def initialise_solution(self, index: int, mode: Optional[InitialisationMode] = None) -> None:
        """Create a new initial solution in slot ``index``.

        ``mode`` overrides the configured initialisation mode for this call.
        """
        objective = self._require_objective()
        self._check_slot(index)

        solution = create_solution(mode or self.initialisation_mode, objective, self.rng)
        self._store(index, solution)

    def get_solution(self, index: int) -> Solution:
        """Return the solution held in slot ``index``.

        Raises:
            InvalidIndex: If the slot is outside the memory
            UninitializedSolution: If nothing was stored in the slot
        """
        self._check_slot(index)
        solution = self._memory[index]
        if solution is None:
            raise UninitializedSolution(
                f"Solution at index {index} is not initialised",
                {"index": index},
            )
        return solution

    def copy_solution(self, source: int, destination: int) -> None:
        """Store a deep copy of slot ``source`` into slot ``destination``."""
        self._check_slot(destination)
        self._memory[destination] = self.get_solution(source).copy()

    def compare_solutions(self, index_a: int, index_b: int) -> bool:
        """Check whether two slots hold the same route."""
        return self.get_solution(index_a) == self.get_solution(index_b)

    def get_function_value(self, index: int) -> int:
        return self.get_solution(index).objective_value

    def get_best_solution(self) -> Solution:
        """Return a copy of the best solution found since the instance was loaded."""
        return self._require_best().copy()

    def get_best_solution_value(self) -> int:
        return self._require_best().objective_value

    # ------------------------------------------------------------------
    # Heuristics
    # ------------------------------------------------------------------

    @property
    def number_of_heuristics(self) -> int:
        return len(self.heuristics)

    def get_heuristic(self, heuristic_id: int) -> HeuristicDescriptor:
        if heuristic_id < 0 or heuristic_id >= len(self.heuristics):
            raise InvalidIndex(
                f"Invalid heuristic index: {heuristic_id}",
                {"heuristic_id": heuristic_id, "number_of_heuristics": len(self.heuristics)},
            )
        return self.heuristics[heuristic_id]

    def get_heuristics_of_type(self, heuristic_type: HeuristicType) -> List[int]:
        """Ids of all heuristics in a category (empty if there are none)."""
        heuristic_type = HeuristicType(heuristic_type)
        return [i for i, h in enumerate(self.heuristics) if h.heuristic_type == heuristic_type]

    def get_heuristics_that_use_depth_of_search(self) -> List[int]:
        return [i for i, h in enumerate(self.heuristics) if h.uses_depth_of_search]

    def get_heuristics_that_use_intensity_of_mutation(self) -> List[int]:
        return [i for i, h in enumerate(self.heuristics) if h.uses_intensity_of_mutation]

    def set_depth_of_search(self, value: float) -> None:
        self.depth_of_search = _clamp_parameter(value)

    def set_intensity_of_mutation(self, value: float) -> None:
        self.intensity_of_mutation = _clamp_parameter(value)

    def apply_heuristic(self, heuristic_id: int, source: int, destination: int) -> int:
        """
        Apply a heuristic to a copy of slot ``source`` and store it in ``destination``.

        ``source`` and ``destination`` may be the same slot. Crossover
        heuristics called this way use their single-parent variant.

        Returns:
            Objective value of the new solution
        """
        heuristic = self.get_heuristic(heuristic_id)
        objective = self._require_objective()
        self._check_slot(destination)

        candidate = self.get_solution(source).copy()

        start = time.perf_counter()
        value = heuristic.apply(
            candidate, objective, self.rng, self.depth_of_search, self.intensity_of_mutation
        )
        self._record_call(heuristic_id, start)

        self._store(destination, candidate)
        return value

    def apply_crossover(self, heuristic_id: int, parent1: int, parent2: int, destination: int) -> int:
        """
        Apply a heuristic to two parent slots and store the child in ``destination``.

        The destination may be one of the parent slots. Non-crossover
        heuristics are applied to a copy of the first parent.

        Returns:
            Objective value of the child
        """
        heuristic = self.get_heuristic(heuristic_id)
        objective = self._require_objective()
        self._check_slot(destination)

        first = self.get_solution(parent1)
        second = self.get_solution(parent2)
        child = first.copy()

        start = time.perf_counter()
        if heuristic.is_crossover:
            value = heuristic.crossover(
                first, second, child, objective, self.rng,
                self.depth_of_search, self.intensity_of_mutation,
            )
        else:
            value = heuristic.apply(
                child, objective, self.rng, self.depth_of_search, self.intensity_of_mutation
            )
        self._record_call(heuristic_id, start)

        self._store(destination, child)
        return value

    def get_heuristic_call_record(self) -> List[int]:
        """Number of times each heuristic has been applied."""
        return list(self._call_record)

    def get_heuristic_call_time_record(self) -> List[float]:
        """Total seconds spent inside each heuristic."""
        return list(self._call_time_record)

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def route_as_locations(self) -> List[Location]:
        """Stops of the best solution: hotel, points of interest, airport."""
        return self.instance.route_as_locations(self._require_best().route)

    def solution_to_string(self, index: int) -> str:
        solution = self.get_solution(index)
        return format_route(self.instance.route_as_locations(solution.route))

    def best_solution_to_string(self) -> str:
        return format_route(self.route_as_locations())

    def __str__(self) -> str:
        return "Sightseeing Problem Domain"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_objective(self) -> ObjectiveFunction:
        if self.objective is None:
            raise UninitializedSolution("No instance loaded. Call load_instance() first.")
        return self.objective

    def _require_best(self) -> Solution:
        if self._best is None:
            raise UninitializedSolution("No solution has been initialised yet")
        return self._best

    def _check_slot(self, index: int) -> None:
        if index < 0 or index >= len(self._memory):
            raise InvalidIndex(
                f"Invalid solution index: {index}",
                {"index": index, "memory_size": len(self._memory)},
            )

    def _record_call(self, heuristic_id: int, start: float) -> None:
        self._call_record[heuristic_id] += 1
        self._call_time_record[heuristic_id] += time.perf_counter() - start

    def _store(self, index: int, solution: Solution) -> None:
        """Place ``solution`` in a slot and update the best solution."""
        if self.debug_checks:
            check_permutation(solution.route, self.instance.number_of_locations)

        self._memory[index] = solution

        if self._best is None or solution.objective_value < self._best.objective_value:
            self._best = solution.copy()
            logger.debug(f"New best solution: cost={solution.objective_value}")
