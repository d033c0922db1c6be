"""Helpers shared by the low-level heuristics."""

from typing import List

from sightseeing.models.solution import Solution
from sightseeing.objective import ObjectiveFunction


# Upper edges of the parameter buckets [0.0, 0.2), [0.2, 0.4), ...
_PARAMETER_THRESHOLDS = (0.2, 0.4, 0.6, 0.8, 1.0)

# Local search passes per bucket; 1.0 falls in the last bucket
_DEPTH_COUNTS = (1, 2, 3, 4, 5, 5)

# Mutation moves per bucket; 1.0 gets its own doubling
_INTENSITY_COUNTS = (1, 2, 4, 8, 16, 32)


def _bucket(value: float) -> int:
    for bucket, threshold in enumerate(_PARAMETER_THRESHOLDS):
        if value < threshold:
            return bucket
    return len(_PARAMETER_THRESHOLDS)


def iterations_for_depth(depth_of_search: float) -> int:
    """Number of local search passes for a depth of search in [0, 1]."""
    return _DEPTH_COUNTS[_bucket(depth_of_search)]


def iterations_for_intensity(intensity_of_mutation: float) -> int:
    """Number of mutation moves for an intensity of mutation in [0, 1]."""
    return _INTENSITY_COUNTS[_bucket(intensity_of_mutation)]


def swap(route: List[int], i: int, j: int) -> None:
    route[i], route[j] = route[j], route[i]


def reverse_segment(route: List[int], start: int, end: int) -> None:
    """Reverse ``route[start..end]`` in place (inclusive bounds)."""
    route[start:end + 1] = route[start:end + 1][::-1]


def refresh_objective(solution: Solution, objective: ObjectiveFunction) -> int:
    """Re-evaluate ``solution`` from its route and store the cost."""
    value = objective.evaluate(solution.representation)
    solution.objective_value = value
    return value
