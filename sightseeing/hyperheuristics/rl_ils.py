"""Reinforcement learning iterated local search (RL-ILS).

Selects (mutation, local search) pairs by roulette wheel over bounded
integer scores. Each iteration perturbs the current solution with the
mutation, refines it with the local search and moves to the result
unconditionally. The pair is rewarded (+1) when the move improved the
cost and punished (-1) when it made it worse.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import List, Optional

from sightseeing.config import CANDIDATE_SOLUTION_INDEX, CURRENT_SOLUTION_INDEX
from sightseeing.domain import SightseeingDomain
from sightseeing.heuristics.types import HeuristicType
from sightseeing.hyperheuristics.acceptance import AcceptAllMoves
from sightseeing.hyperheuristics.base import HyperHeuristic
from sightseeing.hyperheuristics.config import HyperHeuristicConfig
from sightseeing.hyperheuristics.scores import BoundedScoreTable
from sightseeing.hyperheuristics.selection import RouletteWheelSelection
from sightseeing.logger import SearchTraceLogger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeuristicPair:
    """Mutation followed by local search. Either side may be absent."""
    mutation: Optional[int]
    local_search: Optional[int]

    def __str__(self) -> str:
        return f"({self.mutation}, {self.local_search})"


def build_heuristic_pairs(domain: SightseeingDomain) -> List[HeuristicPair]:
    """All (mutation, local search) combinations the domain offers."""
    mutation_ids = domain.get_heuristics_of_type(HeuristicType.MUTATION)
    local_search_ids = domain.get_heuristics_of_type(HeuristicType.LOCAL_SEARCH)

    if not mutation_ids and not local_search_ids:
        raise ValueError("RL-ILS needs at least one mutation or local search heuristic")

    return [
        HeuristicPair(mutation, local_search)
        for mutation, local_search in itertools.product(mutation_ids or [None], local_search_ids or [None])
    ]


class RLILSHyperHeuristic(HyperHeuristic):
    """Iterated local search with learned (mutation, local search) pair scores."""

    name = "rl-ils"

    def __init__(
        self,
        seed: int,
        config: Optional[HyperHeuristicConfig] = None,
        trace_logger: Optional[SearchTraceLogger] = None,
    ):
        super().__init__(seed, config)
        self.trace_logger = trace_logger
        self.pairs: List[HeuristicPair] = []
        self.score_table: Optional[BoundedScoreTable] = None

    def solve(self, domain: SightseeingDomain) -> None:
        config = self.config
        current, candidate = CURRENT_SOLUTION_INDEX, CANDIDATE_SOLUTION_INDEX

        domain.set_memory_size(config.memory_size)
        domain.initialise_solution(current)

        self.pairs = build_heuristic_pairs(domain)
        self.score_table = BoundedScoreTable(
            self.pairs,
            default_score=int(config.default_score),
            lower_bound=int(config.lower_bound),
            upper_bound=int(config.upper_bound),
        )
        selection = RouletteWheelSelection(self.score_table, self.rng)
        acceptance = AcceptAllMoves()

        logger.debug(f"RL-ILS with {len(self.pairs)} heuristic pairs")

        while not self.has_time_expired():
            pair = selection.select()
            self.selection_history.append(pair)

            current_value = domain.get_function_value(current)
            if pair.mutation is not None:
                domain.apply_heuristic(pair.mutation, current, candidate)
            else:
                domain.copy_solution(current, candidate)
            if pair.local_search is not None:
                domain.apply_heuristic(pair.local_search, candidate, candidate)
            candidate_value = domain.get_function_value(candidate)

            decision = acceptance.decide(current_value, candidate_value, self.rng)
            self.score_table.credit(pair, decision.reward)
            domain.copy_solution(candidate, current)

            self.iterations += 1

            if self.trace_logger is not None:
                self.trace_logger.log_iteration(
                    iteration=self.iterations,
                    heuristic=str(pair),
                    current_value=current_value,
                    candidate_value=candidate_value,
                    best_value=domain.get_best_solution_value(),
                    accepted=decision.accept,
                    reward=decision.reward,
                    scores=self.score_table.as_dict(),
                )
