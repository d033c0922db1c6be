"""Local search heuristics.

All three are first-improvement searches. Moves are scored with the
incremental deltas of the objective function; the final route is always
re-evaluated in full before the cost is stored.

- Davis's hill climbing: adjacent swaps in a freshly shuffled order per pass
- Next descent: adjacent swaps scanned left to right
- 2-opt: segment reversals (i < j), budget scaled by depth of search
"""

import random

from sightseeing.models.solution import Solution
from sightseeing.objective import ObjectiveFunction
from sightseeing.heuristics.common import (
    iterations_for_depth,
    refresh_objective,
    reverse_segment,
    swap,
)


def daviss_hill_climbing(
    solution: Solution,
    objective: ObjectiveFunction,
    rng: random.Random,
    depth_of_search: float,
    intensity_of_mutation: float,
) -> int:
    """Apply the first improving adjacent swap found in a random scan order.

    Each pass reshuffles the swap positions. Stops after the number of passes
    given by the depth of search, or as soon as a pass finds no improvement.
    """
    route = solution.route
    positions = list(range(len(route) - 1))

    for _ in range(iterations_for_depth(depth_of_search)):
        rng.shuffle(positions)
        improved = False

        for i in positions:
            if objective.adjacent_swap_delta(route, i) < 0:
                swap(route, i, i + 1)
                improved = True
                break

        if not improved:
            break

    return refresh_objective(solution, objective)


def next_descent(
    solution: Solution,
    objective: ObjectiveFunction,
    rng: random.Random,
    depth_of_search: float,
    intensity_of_mutation: float,
) -> int:
    """Apply the first improving adjacent swap found scanning left to right.

    Same pass structure as Davis's hill climbing, with a fixed scan order.
    """
    route = solution.route

    for _ in range(iterations_for_depth(depth_of_search)):
        improved = False

        for i in range(len(route) - 1):
            if objective.adjacent_swap_delta(route, i) < 0:
                swap(route, i, i + 1)
                improved = True
                break

        if not improved:
            break

    return refresh_objective(solution, objective)


def two_opt_budget(number_of_locations: int, depth_of_search: float) -> int:
    """Number of (i, j) reversals 2-opt may try for this depth of search."""
    max_pairs = number_of_locations * (number_of_locations - 1) // 2
    return int(max(1, min(max_pairs, max_pairs * depth_of_search)))


def two_opt(
    solution: Solution,
    objective: ObjectiveFunction,
    rng: random.Random,
    depth_of_search: float,
    intensity_of_mutation: float,
) -> int:
    """Apply the first improving segment reversal within the search budget.

    Pairs are scanned in lexicographic order. The route is only modified
    when an improving reversal is found.
    """
    route = solution.route
    n = len(route)
    budget = two_opt_budget(n, depth_of_search)
    tried = 0

    for i in range(n - 1):
        for j in range(i + 1, n):
            if tried >= budget:
                return refresh_objective(solution, objective)
            tried += 1

            if objective.reversal_delta(route, i, j) < 0:
                reverse_segment(route, i, j)
                return refresh_objective(solution, objective)

    return refresh_objective(solution, objective)
