import pytest

from cricket_scorer.config import get_settings
from cricket_scorer.engine import MatchStateMachine
from cricket_scorer.models import Batter, Bowler, Inning, Match, Player


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; drop the cache around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_inning() -> Inning:
    return Inning(
        batter_on_strike="a1",
        batter_off_strike="a2",
        bowler_current="b1",
        bowler_previous="b2",
        batters={"a1": Batter(), "a2": Batter()},
        batting_order=["a1", "a2"],
        bowlers={"b1": Bowler(), "b2": Bowler()},
        bowling_order=["b1", "b2"],
    )


@pytest.fixture
def match() -> Match:
    m = Match(team1_name="Hawks", team2_name="Owls", innings=[make_inning()])
    for pid, name in [("a1", "Ames"), ("a2", "Bell")]:
        m.team1_players[pid] = Player(id=pid, name=name)
    for pid, name in [("b1", "Cole"), ("b2", "Dunn")]:
        m.team2_players[pid] = Player(id=pid, name=name)
    return m


@pytest.fixture
def machine(match: Match) -> MatchStateMachine:
    return MatchStateMachine(match)


@pytest.fixture
def inning(machine: MatchStateMachine) -> Inning:
    return machine.match.innings[0]


@pytest.fixture
def new_machine():
    """Factory for independent machines over a one-inning match."""
    def _make() -> MatchStateMachine:
        return MatchStateMachine(Match(innings=[make_inning()]))
    return _make
