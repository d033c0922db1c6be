"""Roulette wheel heuristic selection."""

import logging
import random
from typing import Hashable, List, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)


class ScoreTable(Protocol):
    heuristics: List[Hashable]

    def weights(self) -> Sequence[float]:
        ...


class RouletteWheelSelection:
    """Select a heuristic with probability proportional to its weight.

    Heuristics with a zero weight are never selected. When every weight is
    zero the default heuristic is returned (the first one in the table if no
    default was given).
    """

    def __init__(
        self,
        table: ScoreTable,
        rng: random.Random,
        default_heuristic: Optional[Hashable] = None,
    ):
        self.table = table
        self.rng = rng
        self.default_heuristic = default_heuristic

    def select(self) -> Hashable:
        heuristics = self.table.heuristics
        weights = list(self.table.weights())
        total = sum(w for w in weights if w > 0)

        if total <= 0:
            fallback = self.default_heuristic if self.default_heuristic is not None else heuristics[0]
            logger.debug(f"All selection weights are zero, using default heuristic {fallback}")
            return fallback

        draw = self.rng.random()
        cumulative = 0.0
        last_positive = None

        for heuristic, weight in zip(heuristics, weights):
            if weight <= 0:
                continue
            cumulative += weight / total
            last_positive = heuristic
            if cumulative >= draw:
                return heuristic

        # Floating point rounding left the cumulative sum just below the draw
        return last_positive
