"""Inning model and per-player figures."""

from typing import Dict, List, Optional

from pydantic import Field

from .base import StateModel
from .players import HowOut, PlayerId


class Batter(StateModel):
    """Batting figures for one player in one inning."""

    runs: int = Field(0, ge=0, description="Runs off the bat")
    balls_faced: int = Field(0, ge=0, description="Balls faced")
    fours: int = Field(0, ge=0, description="Boundary fours")
    sixes: int = Field(0, ge=0, description="Boundary sixes")
    bowler: Optional[PlayerId] = Field(None, description="Bowler credited with the dismissal")
    fielders: List[PlayerId] = Field(default_factory=list, description="Fielders involved in the dismissal")
    how_out: HowOut = Field(HowOut.NOT_OUT, description="Dismissal kind")

    @property
    def strike_rate(self) -> float:
        """Runs per 100 balls faced."""
        if self.balls_faced == 0:
            return 0.0
        return round(self.runs * 100 / self.balls_faced, 2)


class Bowler(StateModel):
    """Bowling figures for one player in one inning."""

    balls: int = Field(0, ge=0, description="Legal deliveries bowled")
    maidens: int = Field(0, ge=0, description="Maiden overs")
    no_balls: int = Field(0, ge=0, description="No-balls bowled")
    runs: int = Field(0, ge=0, description="Runs conceded")
    wides: int = Field(0, ge=0, description="Wides bowled")

    def overs(self, balls_per_over: int = 6) -> str:
        """Get overs in scorebook format (e.g. "4.2" for 4 overs 2 balls)."""
        complete, remainder = divmod(self.balls, balls_per_over)
        return f"{complete}.{remainder}"

    def economy(self, balls_per_over: int = 6) -> float:
        """Runs conceded per over."""
        if self.balls == 0:
            return 0.0
        return round(self.runs * balls_per_over / self.balls, 2)


class FallOfWicket(StateModel):
    """One entry in the fall-of-wickets log."""

    batter: PlayerId
    over: str
    score: int = Field(..., ge=0)
    wicket: int = Field(..., ge=1)


class Inning(StateModel):
    """Live state of a single inning."""

    # Active players
    batter_on_strike: Optional[PlayerId] = None
    batter_off_strike: Optional[PlayerId] = None
    bowler_current: Optional[PlayerId] = None
    bowler_previous: Optional[PlayerId] = None

    # Figures keyed by player; display order comes from the order lists
    batters: Dict[PlayerId, Batter] = Field(default_factory=dict)
    batting_order: List[PlayerId] = Field(default_factory=list)
    bowlers: Dict[PlayerId, Bowler] = Field(default_factory=dict)
    bowling_order: List[PlayerId] = Field(default_factory=list)

    # Extras breakdown
    byes: int = Field(0, ge=0)
    leg_byes: int = Field(0, ge=0)
    no_balls: int = Field(0, ge=0)
    penalties: int = Field(0, ge=0)
    wides: int = Field(0, ge=0)

    fall_of_wickets: List[FallOfWicket] = Field(default_factory=list)
    max_overs: Optional[int] = Field(None, ge=1, description="Over limit, None for unlimited")

    @property
    def total_extras(self) -> int:
        """Calculate total extras."""
        return self.byes + self.leg_byes + self.no_balls + self.penalties + self.wides

    @property
    def total_runs(self) -> int:
        return sum(batter.runs for batter in self.batters.values()) + self.total_extras

    @property
    def wickets(self) -> int:
        return len(self.fall_of_wickets)

    @property
    def legal_balls(self) -> int:
        return sum(bowler.balls for bowler in self.bowlers.values())

    def __repr__(self) -> str:
        return f"<Inning({self.total_runs}/{self.wickets}, striker={self.batter_on_strike}, bowler={self.bowler_current})>"
