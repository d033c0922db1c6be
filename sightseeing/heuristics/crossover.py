"""Crossover heuristics: order crossover (OX) and one-point crossover.

Both build a fresh child route, write it into the destination solution and
re-evaluate it. Routes shorter than three locations are copied from the
first parent unchanged, since no proper cut exists.
"""

import random
from typing import List, Sequence, Tuple

from sightseeing.models.solution import Solution, SolutionRepresentation
from sightseeing.objective import ObjectiveFunction
from sightseeing.heuristics.common import refresh_objective


MIN_CROSSOVER_LENGTH = 3


def choose_cut_points(n: int, rng: random.Random) -> Tuple[int, int]:
    """Pick cut1 < cut2 leaving at least one location outside the segment."""
    cut1 = rng.randrange(n - 1)
    # With cut1 == 0 the segment must stop before the last position
    upper = n - 2 if cut1 == 0 else n - 1
    cut2 = rng.randint(cut1 + 1, upper)
    return cut1, cut2


def order_crossover_route(
    parent1: Sequence[int],
    parent2: Sequence[int],
    cut1: int,
    cut2: int,
) -> List[int]:
    """Build an OX child for the given inclusive cut points.

    parent1[cut1..cut2] is copied in place. The remaining positions, starting
    right after the segment and wrapping around, take parent2's genes in the
    order they appear from cut2 + 1 onwards, skipping genes already copied.
    """
    n = len(parent1)
    child = list(parent1)
    segment = set(parent1[cut1:cut2 + 1])

    start = (cut2 + 1) % n
    donors = [gene for gene in list(parent2[start:]) + list(parent2[:start]) if gene not in segment]
    positions = [(start + k) % n for k in range(n - len(segment))]

    for position, gene in zip(positions, donors):
        child[position] = gene

    return child


def one_point_crossover_route(
    parent1: Sequence[int],
    parent2: Sequence[int],
    cut: int,
) -> List[int]:
    """Take parent1[:cut] then parent2's genes not yet used.

    A final repair pass appends any index still missing, so the child is a
    permutation even if parent2 is not.
    """
    n = len(parent1)
    child = list(parent1[:cut])
    placed = set(child)

    for gene in parent2:
        if gene not in placed and 0 <= gene < n:
            child.append(gene)
            placed.add(gene)

    # Repair
    child.extend(i for i in range(n) if i not in placed)
    return child


def order_crossover(
    parent1: Solution,
    parent2: Solution,
    child: Solution,
    objective: ObjectiveFunction,
    rng: random.Random,
    depth_of_search: float,
    intensity_of_mutation: float,
) -> int:
    """Order crossover (OX) of two parents into ``child``."""
    n = len(parent1.route)
    if n < MIN_CROSSOVER_LENGTH:
        child.representation.set_route(parent1.route)
    else:
        cut1, cut2 = choose_cut_points(n, rng)
        child.representation.set_route(order_crossover_route(parent1.route, parent2.route, cut1, cut2))
    return refresh_objective(child, objective)


def order_crossover_single(
    solution: Solution,
    objective: ObjectiveFunction,
    rng: random.Random,
    depth_of_search: float,
    intensity_of_mutation: float,
) -> int:
    """OX with a single parent leaves the route unchanged."""
    return refresh_objective(solution, objective)


def one_point_crossover(
    parent1: Solution,
    parent2: Solution,
    child: Solution,
    objective: ObjectiveFunction,
    rng: random.Random,
    depth_of_search: float,
    intensity_of_mutation: float,
) -> int:
    """One-point crossover of two parents into ``child``."""
    n = len(parent1.route)
    if n < MIN_CROSSOVER_LENGTH:
        child.representation.set_route(parent1.route)
    else:
        cut = 1 + rng.randrange(n - 2)
        child.representation.set_route(one_point_crossover_route(parent1.route, parent2.route, cut))
    return refresh_objective(child, objective)


def one_point_self_crossover(
    solution: Solution,
    objective: ObjectiveFunction,
    rng: random.Random,
    depth_of_search: float,
    intensity_of_mutation: float,
) -> int:
    """One-point crossover of a solution with a shuffled copy of itself."""
    partner_route = list(solution.route)
    rng.shuffle(partner_route)
    partner = Solution(SolutionRepresentation(partner_route), solution.objective_value)
    return one_point_crossover(solution, partner, solution, objective, rng,
                               depth_of_search, intensity_of_mutation)
