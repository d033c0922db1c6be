"""Learning selection hyper-heuristic.

Each iteration:
1. Select a heuristic by roulette wheel over the score table
2. Apply it to the current solution into the candidate slot (crossovers
   first build a second parent in the candidate slot)
3. Accept or reject with AdaptiveAcceptance and credit the heuristic
4. Cool the acceptance rate
5. Occasionally intensify the current solution with a local search
"""

import logging
from typing import Hashable, List, Optional, Sequence, Union

from sightseeing.config import CANDIDATE_SOLUTION_INDEX, CURRENT_SOLUTION_INDEX
from sightseeing.domain import SightseeingDomain
from sightseeing.heuristics.types import HeuristicType
from sightseeing.hyperheuristics.acceptance import AdaptiveAcceptance, MoveOutcome
from sightseeing.hyperheuristics.base import HyperHeuristic
from sightseeing.hyperheuristics.config import (
    CreditPolicy,
    HyperHeuristicConfig,
    SecondParentStrategy,
)
from sightseeing.hyperheuristics.scores import BoundedScoreTable, QualityTable
from sightseeing.hyperheuristics.selection import RouletteWheelSelection
from sightseeing.initialization import InitialisationMode
from sightseeing.logger import SearchTraceLogger

logger = logging.getLogger(__name__)


def create_score_table(
    config: HyperHeuristicConfig,
    heuristics: Sequence[Hashable],
) -> Union[BoundedScoreTable, QualityTable]:
    """Build the score table for the configured credit policy."""
    if CreditPolicy(config.credit_policy) == CreditPolicy.BOUNDED:
        return BoundedScoreTable(
            heuristics,
            default_score=int(config.default_score),
            lower_bound=int(config.lower_bound),
            upper_bound=int(config.upper_bound),
        )
    return QualityTable(
        heuristics,
        initial_quality=config.default_score,
        min_quality=config.lower_bound,
        max_quality=config.upper_bound,
        learning_rate=config.learning_rate,
        beta=config.beta,
        decay_rate=config.decay_rate,
    )


class LearningSelectionHyperHeuristic(HyperHeuristic):
    """Selection hyper-heuristic with learned heuristic scores and adaptive acceptance."""

    name = "learning"

    def __init__(
        self,
        seed: int,
        config: Optional[HyperHeuristicConfig] = None,
        trace_logger: Optional[SearchTraceLogger] = None,
    ):
        super().__init__(seed, config)
        self.trace_logger = trace_logger
        self.score_table: Optional[Union[BoundedScoreTable, QualityTable]] = None
        self.intensifications = 0

    def solve(self, domain: SightseeingDomain) -> None:
        config = self.config
        current, candidate = CURRENT_SOLUTION_INDEX, CANDIDATE_SOLUTION_INDEX

        domain.set_memory_size(config.memory_size)
        domain.initialise_solution(current)

        heuristic_ids = list(range(domain.number_of_heuristics))
        self.score_table = create_score_table(config, heuristic_ids)
        selection = RouletteWheelSelection(self.score_table, self.rng, config.default_heuristic)
        acceptance = AdaptiveAcceptance(
            initial_rate=config.initial_acceptance_rate,
            cooling_rate=config.cooling_rate,
            neutral_probability=config.neutral_acceptance_probability,
            improving_reward=config.improving_reward,
            neutral_reward=config.neutral_reward,
            worsening_reward=config.worsening_reward,
        )

        mutation_ids = domain.get_heuristics_of_type(HeuristicType.MUTATION)
        local_search_ids = domain.get_heuristics_of_type(HeuristicType.LOCAL_SEARCH)
        crossover_ids = set(domain.get_heuristics_of_type(HeuristicType.CROSSOVER))

        self.intensifications = 0
        stagnation = 0

        logger.debug(
            f"Heuristics: {len(mutation_ids)} mutation, {len(local_search_ids)} local search, "
            f"{len(crossover_ids)} crossover; initial cost={domain.get_function_value(current)}"
        )

        while not self.has_time_expired():
            heuristic_id = selection.select()
            self.selection_history.append(heuristic_id)

            current_value = domain.get_function_value(current)
            if heuristic_id in crossover_ids:
                self._prepare_second_parent(domain, mutation_ids)
                candidate_value = domain.apply_crossover(heuristic_id, current, candidate, candidate)
            else:
                candidate_value = domain.apply_heuristic(heuristic_id, current, candidate)

            decision = acceptance.decide(current_value, candidate_value, self.rng)
            self.score_table.credit(heuristic_id, decision.reward)

            if decision.accept:
                domain.copy_solution(candidate, current)

            acceptance.cool()

            if decision.outcome == MoveOutcome.IMPROVING:
                stagnation = 0
            else:
                stagnation += 1

            if self._should_intensify(stagnation, local_search_ids):
                local_search_id = self.rng.choice(local_search_ids)
                domain.apply_heuristic(local_search_id, current, current)
                self.intensifications += 1
                stagnation = 0

            self.iterations += 1

            if config.decay_interval > 0 and self.iterations % config.decay_interval == 0:
                if isinstance(self.score_table, QualityTable):
                    self.score_table.decay()

            if self.trace_logger is not None:
                self.trace_logger.log_iteration(
                    iteration=self.iterations,
                    heuristic=domain.get_heuristic(heuristic_id).name,
                    current_value=current_value,
                    candidate_value=candidate_value,
                    best_value=domain.get_best_solution_value(),
                    accepted=decision.accept,
                    reward=decision.reward,
                    scores=self.score_table.as_dict(),
                )

        logger.info(
            f"Learning search: {self.intensifications} intensifications, "
            f"final acceptance rate={acceptance.acceptance_rate:.4f}"
        )

    def _prepare_second_parent(self, domain: SightseeingDomain, mutation_ids: List[int]) -> None:
        """Put the second crossover parent into the candidate slot."""
        if (
            SecondParentStrategy(self.config.second_parent) == SecondParentStrategy.RANDOM
            or not mutation_ids
        ):
            domain.initialise_solution(CANDIDATE_SOLUTION_INDEX, InitialisationMode.RANDOM)
        else:
            mutation_id = self.rng.choice(mutation_ids)
            domain.apply_heuristic(mutation_id, CURRENT_SOLUTION_INDEX, CANDIDATE_SOLUTION_INDEX)

    def _should_intensify(self, stagnation: int, local_search_ids: List[int]) -> bool:
        if not local_search_ids:
            return False
        limit = self.config.stagnation_limit
        if limit > 0 and stagnation >= limit:
            return True
        return self.rng.random() < self.config.intensification_probability
