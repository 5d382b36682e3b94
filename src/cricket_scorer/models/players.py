"""Player model and dismissal kinds."""

from enum import Enum

from pydantic import ConfigDict, Field

from .base import StateModel


PlayerId = str


class HowOut(str, Enum):
    """Enumeration of the ways a batter's innings can end."""
    ABSENT_INJURED = "absent injured"
    BOWLED = "bowled"
    CAUGHT = "caught"
    HANDLING_THE_BALL = "handling the ball"
    HIT_WICKET = "hit wicket"
    NOT_OUT = "not out"
    LBW = "lbw"
    OBSTRUCTING_THE_FIELD = "obstructing the field"
    RETIRED_HURT = "retired hurt"
    RETIRED_OUT = "retired out"
    RUN_OUT = "run out"
    STUMPED = "stumped"
    TIMED_OUT = "timed out"


class Player(StateModel):
    """A registered player. Owned by the roster, referenced by id elsewhere."""

    model_config = ConfigDict(frozen=True)

    id: PlayerId = Field(..., min_length=1, description="Unique player ID")
    name: str = Field(..., description="Display name")

    def __repr__(self) -> str:
        return f"<Player(id='{self.id}', name='{self.name}')>"
