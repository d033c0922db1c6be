"""Type definitions for low-level heuristics.

A heuristic is described by a tagged record rather than a subclass: its
category is a field, every heuristic has a single-parent ``apply`` and
crossover heuristics additionally carry a two-parent ``crossover``.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from sightseeing.models.solution import Solution
from sightseeing.objective import ObjectiveFunction


class HeuristicType(str, Enum):
    MUTATION = "mutation"
    LOCAL_SEARCH = "local_search"
    CROSSOVER = "crossover"


# apply(solution, objective, rng, depth_of_search, intensity_of_mutation) -> new cost
ApplyFunction = Callable[[Solution, ObjectiveFunction, random.Random, float, float], int]

# crossover(parent1, parent2, child, objective, rng, depth_of_search, intensity_of_mutation) -> new cost
CrossoverFunction = Callable[
    [Solution, Solution, Solution, ObjectiveFunction, random.Random, float, float], int
]


@dataclass(frozen=True)
class HeuristicDescriptor:
    """Describes one low-level heuristic.

    Attributes:
        name: Human readable name
        heuristic_type: Category used by the search loops
        apply: Modifies a solution in place and returns its new cost
        crossover: Builds a child from two parents (crossover heuristics only)
        uses_depth_of_search: Whether depth of search changes its behaviour
        uses_intensity_of_mutation: Whether intensity of mutation changes its behaviour
    """
    name: str
    heuristic_type: HeuristicType
    apply: ApplyFunction
    crossover: Optional[CrossoverFunction] = None
    uses_depth_of_search: bool = False
    uses_intensity_of_mutation: bool = False

    @property
    def is_crossover(self) -> bool:
        return self.crossover is not None

    def __repr__(self) -> str:
        return f"HeuristicDescriptor({self.name}, {self.heuristic_type.value})"
