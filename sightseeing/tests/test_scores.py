"""Tests for score tables, roulette wheel selection and move acceptance."""

import random

import pytest

from sightseeing.hyperheuristics.acceptance import (
    AcceptAllMoves,
    AdaptiveAcceptance,
    MoveOutcome,
)
from sightseeing.hyperheuristics.scores import BoundedScoreTable, QualityTable
from sightseeing.hyperheuristics.selection import RouletteWheelSelection


class NoRandom:
    """Random source that fails the test if it is ever used."""

    def random(self):
        raise AssertionError("random draw not expected")


@pytest.fixture
def bounded_table():
    """Create a bounded table over three heuristics."""
    return BoundedScoreTable([0, 1, 2], default_score=10, lower_bound=1, upper_bound=12)


def test_bounded_scores_start_at_default(bounded_table):
    """Test scores start at the default and unknown heuristics score 0."""
    assert bounded_table.weights() == [10.0, 10.0, 10.0]
    assert bounded_table.total_score() == 30
    assert bounded_table.get_score(99) == 0


def test_bounded_scores_clamp_at_upper_bound(bounded_table):
    """Test incrementing at the upper bound keeps the upper bound."""
    for _ in range(10):
        bounded_table.increment(0)
    assert bounded_table.get_score(0) == 12


def test_bounded_scores_clamp_at_lower_bound(bounded_table):
    """Test decrementing at the lower bound keeps the lower bound."""
    for _ in range(20):
        bounded_table.decrement(1)
    assert bounded_table.get_score(1) == 1


def test_bounded_scores_stay_in_range(bounded_table):
    """Test random credit never moves a score outside the bounds."""
    rng = random.Random(0)
    for _ in range(2000):
        bounded_table.credit(rng.randrange(3), rng.choice([-1.0, -0.5, 0.0, 0.2, 1.0]))
        assert all(1 <= score <= 12 for score in bounded_table.weights())


def test_bounded_credit_sign(bounded_table):
    """Test positive rewards increment, negative decrement, zero is ignored."""
    bounded_table.credit(0, 0.2)
    bounded_table.credit(1, -0.5)
    bounded_table.credit(2, 0.0)
    assert bounded_table.as_dict() == {0: 11, 1: 9, 2: 10}


def test_bounded_default_outside_bounds():
    """Test a default score outside the bounds is rejected."""
    with pytest.raises(ValueError):
        BoundedScoreTable([0], default_score=0, lower_bound=1, upper_bound=10)


def test_quality_update_moves_towards_reward():
    """Test Q <- Q + alpha * (reward - Q)."""
    table = QualityTable([0], initial_quality=10.0, min_quality=1.0, max_quality=100.0, learning_rate=0.1)
    assert table.update(0, 20.0) == pytest.approx(11.0)
    assert table.update(0, 1.0) == pytest.approx(10.0)


def test_quality_is_clamped():
    """Test quality estimates never leave [min, max]."""
    table = QualityTable([0], initial_quality=2.0, min_quality=1.0, max_quality=3.0, learning_rate=1.0)
    table.update(0, -50.0)
    assert table.get_quality(0) == 1.0
    table.update(0, 50.0)
    assert table.get_quality(0) == 3.0


def test_quality_weights_and_decay():
    """Test weights are Q^beta and decay shrinks every estimate."""
    table = QualityTable(
        ["a", "b"], initial_quality=4.0, min_quality=1.0, max_quality=100.0,
        learning_rate=0.5, beta=2.0, decay_rate=0.5,
    )
    assert table.weights() == [16.0, 16.0]

    table.decay()
    assert table.as_dict() == {"a": 2.0, "b": 2.0}

    table.decay()
    table.decay()
    assert table.as_dict() == {"a": 1.0, "b": 1.0}


def test_roulette_wheel_proportions():
    """Test scores [3, 1] select the first heuristic about 75% of the time."""
    table = BoundedScoreTable([0, 1], default_score=3, lower_bound=1, upper_bound=10)
    table.decrement(1)
    table.decrement(1)
    assert table.weights() == [3.0, 1.0]

    selection = RouletteWheelSelection(table, random.Random(42))
    draws = [selection.select() for _ in range(10000)]

    assert draws.count(0) / len(draws) == pytest.approx(0.75, abs=0.02)


def test_roulette_wheel_skips_zero_weights():
    """Test heuristics with zero weight are never selected."""
    table = QualityTable([0, 1, 2], initial_quality=0.0, min_quality=0.0, max_quality=10.0, learning_rate=1.0)
    table.update(1, 5.0)
    selection = RouletteWheelSelection(table, random.Random(1))

    assert {selection.select() for _ in range(200)} == {1}


def test_roulette_wheel_all_zero_uses_default():
    """Test an all-zero table falls back to the default heuristic."""
    table = QualityTable([0, 1, 2], initial_quality=0.0, min_quality=0.0, max_quality=10.0, learning_rate=1.0)

    assert RouletteWheelSelection(table, NoRandom(), default_heuristic=2).select() == 2
    assert RouletteWheelSelection(table, NoRandom()).select() == 0


def test_improving_move_is_always_accepted():
    """Test improving moves are accepted without drawing a random number."""
    acceptance = AdaptiveAcceptance(initial_rate=0.0)
    decision = acceptance.decide(100, 90, NoRandom())

    assert decision.accept is True
    assert decision.outcome == MoveOutcome.IMPROVING
    assert decision.reward == 1.0


def test_neutral_and_worsening_rewards():
    """Test rewards depend on the move, not on acceptance."""
    acceptance = AdaptiveAcceptance()
    rng = random.Random(0)

    assert acceptance.decide(100, 100, rng).reward == 0.2
    assert acceptance.decide(100, 120, rng).reward == -0.5


def test_worsening_moves_rejected_after_cooling():
    """Test a cooled acceptance rate rejects worsening moves."""
    acceptance = AdaptiveAcceptance(initial_rate=0.5, cooling_rate=0.5)
    for _ in range(60):
        acceptance.cool()

    rng = random.Random(3)
    assert not any(acceptance.decide(10, 11, rng).accept for _ in range(100))


def test_cooling_is_geometric():
    """Test the acceptance rate is multiplied by the cooling rate."""
    acceptance = AdaptiveAcceptance(initial_rate=0.5, cooling_rate=0.99)
    acceptance.cool()
    assert acceptance.cool() == pytest.approx(0.5 * 0.99 * 0.99)


def test_accept_all_moves():
    """Test every move is accepted and classified."""
    acceptance = AcceptAllMoves()
    worse = acceptance.decide(10, 20, NoRandom())
    better = acceptance.decide(20, 10, NoRandom())

    assert worse.accept and better.accept
    assert worse.reward < 0 < better.reward
