"""Configuration for the hyper-heuristics.

Contains the credit assignment, selection and acceptance parameters.
The reward magnitudes and acceptance probabilities are empirical tuning
constants; they are defaults, not derived values.

## TUNING NOTES:

- learning_rate / beta: higher beta sharpens exploitation of the best
  heuristic, lower beta keeps the roulette wheel close to uniform
- initial_acceptance_rate / cooling_rate: 0.5 * 0.99^k, so worsening moves
  are almost never accepted after ~500 iterations
- intensification_probability / stagnation_limit: how often a local search
  is forced onto the current solution
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CreditPolicy(str, Enum):
    BOUNDED = "bounded"              # integer scores, +1 / -1
    REINFORCEMENT = "reinforcement"  # Q <- Q + alpha * (reward - Q)


class SecondParentStrategy(str, Enum):
    MUTATED = "mutated"  # current solution with a random mutation applied
    RANDOM = "random"    # freshly initialised solution


@dataclass
class HyperHeuristicConfig:
    """Configuration for the hyper-heuristic search loops."""
    # Solution memory
    memory_size: int = 2

    # Credit assignment
    credit_policy: CreditPolicy = CreditPolicy.REINFORCEMENT
    default_score: float = 10.0
    lower_bound: float = 1.0
    upper_bound: float = 100.0
    learning_rate: float = 0.1   # alpha
    beta: float = 2.0            # selection weight = Q^beta
    decay_rate: float = 1.0      # 1.0 disables forgetting
    decay_interval: int = 0      # iterations between decays, 0 disables

    # Rewards
    improving_reward: float = 1.0
    neutral_reward: float = 0.2
    worsening_reward: float = -0.5

    # Adaptive acceptance
    initial_acceptance_rate: float = 0.5
    cooling_rate: float = 0.99
    neutral_acceptance_probability: float = 0.5

    # Intensification
    intensification_probability: float = 0.1
    stagnation_limit: int = 50   # consecutive non-improving iterations, 0 disables

    # Crossover
    second_parent: SecondParentStrategy = SecondParentStrategy.MUTATED

    # Optional iteration cap (in addition to the time limit)
    max_iterations: Optional[int] = None

    # Heuristic used by the roulette wheel when all weights are zero
    default_heuristic: Optional[int] = None


# Alternative configs for different scenarios
FAST_CONFIG = HyperHeuristicConfig(
    beta=1.0,
    cooling_rate=0.95,
    stagnation_limit=20,
)

THOROUGH_CONFIG = HyperHeuristicConfig(
    learning_rate=0.05,
    beta=3.0,
    cooling_rate=0.999,
    intensification_probability=0.2,
    stagnation_limit=100,
    decay_rate=0.95,
    decay_interval=500,
)
