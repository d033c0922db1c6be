"""Move acceptance criteria.

AdaptiveAcceptance:
- improving move: always accepted, no random draw
- equal cost: accepted with a fixed probability
- worsening move: accepted with a rate that cools every iteration

AcceptAllMoves accepts every candidate and only classifies the move.
"""

import random
from dataclasses import dataclass
from enum import Enum


class MoveOutcome(str, Enum):
    IMPROVING = "improving"
    NEUTRAL = "neutral"
    WORSENING = "worsening"


@dataclass(frozen=True)
class AcceptanceDecision:
    accept: bool
    reward: float
    outcome: MoveOutcome


def classify_move(current_value: float, candidate_value: float) -> MoveOutcome:
    delta = current_value - candidate_value
    if delta > 0:
        return MoveOutcome.IMPROVING
    if delta == 0:
        return MoveOutcome.NEUTRAL
    return MoveOutcome.WORSENING


class AdaptiveAcceptance:
    """Acceptance with a cooling probability for worsening moves."""

    def __init__(
        self,
        initial_rate: float = 0.5,
        cooling_rate: float = 0.99,
        neutral_probability: float = 0.5,
        improving_reward: float = 1.0,
        neutral_reward: float = 0.2,
        worsening_reward: float = -0.5,
    ):
        self.acceptance_rate = initial_rate
        self.cooling_rate = cooling_rate
        self.neutral_probability = neutral_probability
        self.rewards = {
            MoveOutcome.IMPROVING: improving_reward,
            MoveOutcome.NEUTRAL: neutral_reward,
            MoveOutcome.WORSENING: worsening_reward,
        }

    def decide(self, current_value: float, candidate_value: float, rng: random.Random) -> AcceptanceDecision:
        """
        Decide whether to move to the candidate.

        The reward depends only on the kind of move, not on whether it is
        accepted.

        Args:
            current_value: Cost of the current solution
            candidate_value: Cost of the candidate solution
            rng: Random number generator (not drawn from for improving moves)

        Returns:
            AcceptanceDecision with the verdict, reward and move outcome
        """
        outcome = classify_move(current_value, candidate_value)

        if outcome == MoveOutcome.IMPROVING:
            accept = True
        elif outcome == MoveOutcome.NEUTRAL:
            accept = rng.random() < self.neutral_probability
        else:
            accept = rng.random() < self.acceptance_rate

        return AcceptanceDecision(accept=accept, reward=self.rewards[outcome], outcome=outcome)

    def cool(self) -> float:
        """Multiply the worsening acceptance rate by the cooling rate."""
        self.acceptance_rate *= self.cooling_rate
        return self.acceptance_rate


class AcceptAllMoves:
    """Accept every candidate."""

    def __init__(self, improving_reward: float = 1.0, neutral_reward: float = 0.0, worsening_reward: float = -1.0):
        self.rewards = {
            MoveOutcome.IMPROVING: improving_reward,
            MoveOutcome.NEUTRAL: neutral_reward,
            MoveOutcome.WORSENING: worsening_reward,
        }

    def decide(self, current_value: float, candidate_value: float, rng: random.Random) -> AcceptanceDecision:
        outcome = classify_move(current_value, candidate_value)
        return AcceptanceDecision(accept=True, reward=self.rewards[outcome], outcome=outcome)

    def cool(self) -> float:
        return 1.0
