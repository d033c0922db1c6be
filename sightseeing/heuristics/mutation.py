"""Mutation heuristics.

Each mutation performs a number of random moves scaled by the intensity of
mutation (1, 2, 4, 8, 16 or 32 moves) and re-evaluates the route once at
the end. Routes with fewer than two locations are left unchanged.
"""

import random

from sightseeing.models.solution import Solution
from sightseeing.objective import ObjectiveFunction
from sightseeing.heuristics.common import (
    iterations_for_intensity,
    refresh_objective,
    reverse_segment,
    swap,
)


def adjacent_swap(
    solution: Solution,
    objective: ObjectiveFunction,
    rng: random.Random,
    depth_of_search: float,
    intensity_of_mutation: float,
) -> int:
    """Swap randomly chosen neighbouring locations."""
    route = solution.route
    n = len(route)

    if n >= 2:
        for _ in range(iterations_for_intensity(intensity_of_mutation)):
            i = rng.randrange(n - 1)
            swap(route, i, i + 1)

    return refresh_objective(solution, objective)


def reinsertion(
    solution: Solution,
    objective: ObjectiveFunction,
    rng: random.Random,
    depth_of_search: float,
    intensity_of_mutation: float,
) -> int:
    """Remove a random location and insert it at a different random position.

    The locations between the two positions shift by one place.
    """
    route = solution.route
    n = len(route)

    if n >= 2:
        for _ in range(iterations_for_intensity(intensity_of_mutation)):
            source = rng.randrange(n)
            target = rng.randrange(n - 1)
            # Skip over the source so that target != source
            if target >= source:
                target += 1
            route.insert(target, route.pop(source))

    return refresh_objective(solution, objective)


def inversion_mutation(
    solution: Solution,
    objective: ObjectiveFunction,
    rng: random.Random,
    depth_of_search: float,
    intensity_of_mutation: float,
) -> int:
    """Reverse the segment between two random cut points."""
    route = solution.route
    n = len(route)

    if n >= 2:
        for _ in range(iterations_for_intensity(intensity_of_mutation)):
            i = rng.randrange(n)
            j = rng.randrange(n)
            if i > j:
                i, j = j, i
            reverse_segment(route, i, j)

    return refresh_objective(solution, objective)
