"""Default catalogue of low-level heuristics.

Heuristic ids are positions in the list returned by ``default_heuristics``.
"""

from typing import List

from sightseeing.heuristics.types import HeuristicDescriptor, HeuristicType
from sightseeing.heuristics.mutation import adjacent_swap, reinsertion, inversion_mutation
from sightseeing.heuristics.local_search import daviss_hill_climbing, next_descent, two_opt
from sightseeing.heuristics.crossover import (
    order_crossover,
    order_crossover_single,
    one_point_crossover,
    one_point_self_crossover,
)


ADJACENT_SWAP = HeuristicDescriptor(
    name="AdjacentSwap",
    heuristic_type=HeuristicType.MUTATION,
    apply=adjacent_swap,
    uses_intensity_of_mutation=True,
)

REINSERTION = HeuristicDescriptor(
    name="Reinsertion",
    heuristic_type=HeuristicType.MUTATION,
    apply=reinsertion,
    uses_intensity_of_mutation=True,
)

INVERSION_MUTATION = HeuristicDescriptor(
    name="InversionMutation",
    heuristic_type=HeuristicType.MUTATION,
    apply=inversion_mutation,
    uses_intensity_of_mutation=True,
)

DAVISS_HILL_CLIMBING = HeuristicDescriptor(
    name="DavissHillClimbing",
    heuristic_type=HeuristicType.LOCAL_SEARCH,
    apply=daviss_hill_climbing,
    uses_depth_of_search=True,
)

NEXT_DESCENT = HeuristicDescriptor(
    name="NextDescent",
    heuristic_type=HeuristicType.LOCAL_SEARCH,
    apply=next_descent,
    uses_depth_of_search=True,
)

TWO_OPT = HeuristicDescriptor(
    name="TwoOpt",
    heuristic_type=HeuristicType.LOCAL_SEARCH,
    apply=two_opt,
    uses_depth_of_search=True,
)

ORDER_CROSSOVER = HeuristicDescriptor(
    name="OX",
    heuristic_type=HeuristicType.CROSSOVER,
    apply=order_crossover_single,
    crossover=order_crossover,
)

ONE_POINT_CROSSOVER = HeuristicDescriptor(
    name="OnePointX",
    heuristic_type=HeuristicType.CROSSOVER,
    apply=one_point_self_crossover,
    crossover=one_point_crossover,
)


def default_heuristics() -> List[HeuristicDescriptor]:
    """All heuristics, mutations first, then local searches, then crossovers."""
    return [
        ADJACENT_SWAP,
        REINSERTION,
        INVERSION_MUTATION,
        DAVISS_HILL_CLIMBING,
        NEXT_DESCENT,
        TWO_OPT,
        ORDER_CROSSOVER,
        ONE_POINT_CROSSOVER,
    ]
