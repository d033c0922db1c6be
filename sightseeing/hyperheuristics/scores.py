"""Score tables for credit assignment.

Two interchangeable policies:
- BoundedScoreTable: integer scores moved by +1 / -1 within [lower, upper]
- QualityTable: real-valued estimates updated by exponential recency weighting

Both map any hashable heuristic key (an id, or a pair of ids) to a
selection weight and accept a reward through ``credit``.
"""

from typing import Dict, Hashable, List, Sequence


class BoundedScoreTable:
    """Integer heuristic scores kept within [lower_bound, upper_bound]."""

    def __init__(
        self,
        heuristics: Sequence[Hashable],
        default_score: int,
        lower_bound: int,
        upper_bound: int,
    ):
        if not lower_bound <= default_score <= upper_bound:
            raise ValueError(
                f"Default score {default_score} outside [{lower_bound}, {upper_bound}]"
            )

        self.heuristics: List[Hashable] = list(heuristics)
        self.default_score = default_score
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        self._scores: Dict[Hashable, int] = {h: default_score for h in self.heuristics}

    def get_score(self, heuristic: Hashable) -> int:
        """Score of ``heuristic``, or 0 if it is not in the table."""
        return self._scores.get(heuristic, 0)

    def increment(self, heuristic: Hashable) -> None:
        """Add 1 to the score, never going above the upper bound."""
        score = self.get_score(heuristic) + 1
        self._scores[heuristic] = max(self.lower_bound, min(self.upper_bound, score))

    def decrement(self, heuristic: Hashable) -> None:
        """Subtract 1 from the score, never going below the lower bound."""
        score = self.get_score(heuristic) - 1
        self._scores[heuristic] = max(self.lower_bound, min(self.upper_bound, score))

    def credit(self, heuristic: Hashable, reward: float) -> None:
        if reward > 0:
            self.increment(heuristic)
        elif reward < 0:
            self.decrement(heuristic)

    def total_score(self) -> int:
        return sum(self.get_score(h) for h in self.heuristics)

    def weights(self) -> List[float]:
        """Selection weights, in the order of ``heuristics``."""
        return [float(self.get_score(h)) for h in self.heuristics]

    def as_dict(self) -> Dict[Hashable, float]:
        return {h: self.get_score(h) for h in self.heuristics}

    def __repr__(self) -> str:
        return f"BoundedScoreTable({self.as_dict()})"


class QualityTable:
    """Reinforcement-learning quality estimates Q(h).

    Q(h) <- Q(h) + alpha * (reward - Q(h)), clamped to [min_quality, max_quality].
    Selection weights are Q(h) ** beta.
    """

    def __init__(
        self,
        heuristics: Sequence[Hashable],
        initial_quality: float,
        min_quality: float,
        max_quality: float,
        learning_rate: float,
        beta: float = 1.0,
        decay_rate: float = 1.0,
    ):
        if min_quality > max_quality:
            raise ValueError(f"min_quality {min_quality} > max_quality {max_quality}")

        self.heuristics: List[Hashable] = list(heuristics)
        self.min_quality = min_quality
        self.max_quality = max_quality
        self.learning_rate = learning_rate
        self.beta = beta
        self.decay_rate = decay_rate
        start = self._clamp(initial_quality)
        self._quality: Dict[Hashable, float] = {h: start for h in self.heuristics}

    def _clamp(self, value: float) -> float:
        return max(self.min_quality, min(self.max_quality, value))

    def get_quality(self, heuristic: Hashable) -> float:
        return self._quality.get(heuristic, 0.0)

    def update(self, heuristic: Hashable, reward: float) -> float:
        """Move Q(h) towards ``reward`` and return the new estimate."""
        quality = self.get_quality(heuristic)
        quality = self._clamp(quality + self.learning_rate * (reward - quality))
        self._quality[heuristic] = quality
        return quality

    def credit(self, heuristic: Hashable, reward: float) -> None:
        self.update(heuristic, reward)

    def decay(self) -> None:
        """Multiplicative forgetting of every estimate."""
        for heuristic, quality in self._quality.items():
            self._quality[heuristic] = max(self.min_quality, quality * self.decay_rate)

    def weights(self) -> List[float]:
        """Selection weights, in the order of ``heuristics``."""
        return [max(self.get_quality(h), 0.0) ** self.beta for h in self.heuristics]

    def as_dict(self) -> Dict[Hashable, float]:
        return {h: self.get_quality(h) for h in self.heuristics}

    def __repr__(self) -> str:
        return f"QualityTable({self.as_dict()})"
