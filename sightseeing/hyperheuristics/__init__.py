from sightseeing.hyperheuristics.base import HyperHeuristic
from sightseeing.hyperheuristics.config import (
    HyperHeuristicConfig,
    CreditPolicy,
    SecondParentStrategy,
    FAST_CONFIG,
    THOROUGH_CONFIG,
)
from sightseeing.hyperheuristics.learning import LearningSelectionHyperHeuristic
from sightseeing.hyperheuristics.rl_ils import RLILSHyperHeuristic, HeuristicPair

__all__ = [
    "HyperHeuristic",
    "HyperHeuristicConfig",
    "CreditPolicy",
    "SecondParentStrategy",
    "FAST_CONFIG",
    "THOROUGH_CONFIG",
    "LearningSelectionHyperHeuristic",
    "RLILSHyperHeuristic",
    "HeuristicPair",
]
