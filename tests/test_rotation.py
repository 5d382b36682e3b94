import pytest

from cricket_scorer.engine import MatchStateMachine, PreconditionError
from cricket_scorer.models import Match


def test_over_swaps_batters_and_bowlers(machine, inning):
    machine.over()

    assert inning.batter_on_strike == "a2"
    assert inning.batter_off_strike == "a1"
    assert inning.bowler_current == "b2"
    assert inning.bowler_previous == "b1"


def test_over_twice_is_identity(machine, inning):
    machine.over()
    machine.over()

    assert (inning.batter_on_strike, inning.batter_off_strike) == ("a1", "a2")
    assert (inning.bowler_current, inning.bowler_previous) == ("b1", "b2")


def test_over_touches_no_counters(machine, inning):
    machine.delivery("legal", False, "bat", 2)
    before = inning.model_dump()
    machine.over()
    after = inning.model_dump()

    for key in ("batter_on_strike", "batter_off_strike", "bowler_current", "bowler_previous"):
        before.pop(key)
        after.pop(key)
    assert before == after


def test_first_over_with_single_bowler(machine, inning):
    inning.bowler_previous = None
    machine.over()

    assert inning.bowler_current is None
    assert inning.bowler_previous == "b1"


def test_swap_strike_leaves_bowlers(machine, inning):
    machine.swap_strike()

    assert inning.batter_on_strike == "a2"
    assert inning.batter_off_strike == "a1"
    assert inning.bowler_current == "b1"


def test_swap_strike_with_one_batter_at_crease(machine, inning):
    inning.batter_off_strike = None
    machine.swap_strike()

    assert inning.batter_on_strike is None
    assert inning.batter_off_strike == "a1"


def test_rotation_requires_active_inning():
    machine = MatchStateMachine(Match())
    with pytest.raises(PreconditionError):
        machine.over()
    with pytest.raises(PreconditionError):
        machine.swap_strike()
