"""Initial solution construction.

Two strategies are available:
- Random: a uniformly shuffled permutation
- Constructive: nearest neighbour, starting from the hotel

Both evaluate the route before returning, so the cached cost is always valid.
"""

import logging
import random
from enum import Enum
from typing import List

from sightseeing.models.solution import Solution, SolutionRepresentation
from sightseeing.objective import ObjectiveFunction

logger = logging.getLogger(__name__)


class InitialisationMode(str, Enum):
    RANDOM = "random"
    CONSTRUCTIVE = "constructive"


def create_random_solution(objective: ObjectiveFunction, rng: random.Random) -> Solution:
    """Create a solution visiting the locations in a random order."""
    route = list(range(objective.number_of_locations))
    rng.shuffle(route)
    representation = SolutionRepresentation(route)
    return Solution(representation, objective.evaluate(representation))


def create_constructive_solution(objective: ObjectiveFunction) -> Solution:
    """Create a solution by repeatedly visiting the nearest unvisited location.

    Starts from the hotel. Ties are broken by the lowest location index.
    """
    unvisited = set(range(objective.number_of_locations))
    route: List[int] = []

    # First stop: closest to the hotel
    current = min(unvisited, key=lambda loc: (objective.cost_from_hotel(loc), loc))
    route.append(current)
    unvisited.remove(current)

    while unvisited:
        current = min(unvisited, key=lambda loc: (objective.cost(current, loc), loc))
        route.append(current)
        unvisited.remove(current)

    representation = SolutionRepresentation(route)
    return Solution(representation, objective.evaluate(representation))


def create_solution(
    mode: InitialisationMode,
    objective: ObjectiveFunction,
    rng: random.Random,
) -> Solution:
    """Create an initial solution with the requested strategy."""
    if InitialisationMode(mode) == InitialisationMode.CONSTRUCTIVE:
        solution = create_constructive_solution(objective)
    else:
        solution = create_random_solution(objective, rng)
    logger.debug(f"Initial {InitialisationMode(mode).value} solution: cost={solution.objective_value}")
    return solution
