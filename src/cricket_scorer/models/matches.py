"""Match aggregate."""

from typing import Dict, List

from pydantic import Field

from .base import StateModel
from .innings import Inning
from .players import Player, PlayerId


class Match(StateModel):
    """Top-level match state. Sole owner of every inning and its figures."""

    active_inning: int = Field(0, ge=0, le=3, description="Index of the live inning (0-3)")
    innings: List[Inning] = Field(default_factory=list)

    # Format
    balls_per_over: int = Field(6, ge=1)
    innings_per_side: int = Field(2, ge=1, le=2)
    players_per_side: int = Field(11, ge=2)
    follow_on: bool = False

    # Teams
    team1_name: str = ""
    team1_players: Dict[PlayerId, Player] = Field(default_factory=dict)
    team2_name: str = ""
    team2_players: Dict[PlayerId, Player] = Field(default_factory=dict)

    # Whether illegal deliveries count towards a batter's balls faced
    no_balls_as_balls_faced: bool = True
    wides_as_balls_faced: bool = False

    @property
    def current_inning(self) -> Inning:
        """The inning selected by ``active_inning``.

        Raises IndexError when the inning has not been appended yet.
        """
        return self.innings[self.active_inning]

    def __repr__(self) -> str:
        return (
            f"<Match({self.team1_name or 'TBD'} vs {self.team2_name or 'TBD'}, "
            f"innings={len(self.innings)}, active={self.active_inning})>"
        )
