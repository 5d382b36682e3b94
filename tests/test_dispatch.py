import pytest

from cricket_scorer.engine import (
    COMMANDS,
    CommandValidationError,
    MatchStateMachine,
    UnknownCommandError,
)
from cricket_scorer.models import Player
from cricket_scorer.schemas import Command


def test_all_commands_registered():
    assert set(COMMANDS) == {
        "delivery",
        "over",
        "setActiveInning",
        "setFollowOn",
        "setTeam1Name",
        "setTeam1Player",
        "setTeam2Name",
        "setTeam2Player",
        "swapStrike",
    }


def test_delivery_by_camel_case_dict(machine, inning):
    machine.dispatch({
        "type": "delivery",
        "payload": {"ballType": "noBall", "boundary": False, "runType": "legByes", "runs": 1},
    })

    assert inning.bowlers["b1"].runs == 2
    assert inning.no_balls == 2
    assert inning.batter_on_strike == "a2"


def test_dispatch_matches_direct_call(new_machine):
    direct = new_machine()
    dispatched = new_machine()

    direct.delivery("legal", True, "bat", 6)
    dispatched.dispatch(Command(type="delivery", payload={
        "ball_type": "legal", "boundary": True, "run_type": "bat", "runs": 6,
    }))

    assert direct.match.to_dict() == dispatched.match.to_dict()


def test_camel_case_dispatch_matches_direct_call(new_machine):
    direct = new_machine()
    dispatched = new_machine()

    direct.delivery("noBall", False, "legByes", 3)
    dispatched.dispatch({
        "type": "delivery",
        "payload": {"ballType": "noBall", "boundary": False, "runType": "legByes", "runs": 3},
    })

    assert direct.match.to_dict() == dispatched.match.to_dict()


def test_over_and_swap_strike_commands(machine, inning):
    machine.dispatch({"type": "over"})
    assert inning.bowler_current == "b2"
    machine.dispatch({"type": "swapStrike", "payload": {}})
    assert inning.batter_on_strike == "a1"


def test_roster_and_flag_commands(machine):
    machine.dispatch({"type": "setTeam1Name", "payload": {"value": "Ravens"}})
    machine.dispatch({"type": "setTeam2Player", "payload": {"player": {"id": "x9", "name": "Xu"}}})
    machine.dispatch({"type": "setFollowOn", "payload": {"value": True}})

    match = machine.match
    assert match.team1_name == "Ravens"
    assert match.team2_players["x9"] == Player(id="x9", name="Xu")
    assert match.follow_on is True


def test_set_player_upserts_by_id(machine):
    machine.set_team1_player(Player(id="a1", name="Ames Jr"))

    assert machine.match.team1_players["a1"].name == "Ames Jr"
    assert len(machine.match.team1_players) == 2


def test_set_active_inning_command(machine):
    machine.dispatch({"type": "setActiveInning", "payload": {"value": 3}})
    assert machine.match.active_inning == 3


def test_unknown_command(machine):
    with pytest.raises(UnknownCommandError):
        machine.dispatch({"type": "declare"})


@pytest.mark.parametrize("payload", [
    {"ballType": "legal", "boundary": False, "runType": "bat", "runs": -2},
    {"ballType": "bouncer", "boundary": False, "runType": "bat", "runs": 0},
    {"ballType": "legal", "runType": "bat"},
    {"ballType": "legal", "runType": "bat", "runs": 1, "extra": 1},
])
def test_invalid_delivery_payload(machine, inning, payload):
    with pytest.raises(CommandValidationError):
        machine.dispatch({"type": "delivery", "payload": payload})
    assert inning.bowlers["b1"].balls == 0


def test_active_inning_out_of_range(machine):
    with pytest.raises(CommandValidationError):
        machine.dispatch({"type": "setActiveInning", "payload": {"value": 4}})
    assert machine.match.active_inning == 0


def test_follow_on_requires_boolean(machine):
    with pytest.raises(CommandValidationError):
        machine.dispatch({"type": "setFollowOn", "payload": {"value": "yes"}})


def test_malformed_envelope(machine):
    with pytest.raises(CommandValidationError):
        machine.dispatch({"payload": {}})
