"""State models for the cricket scoring system."""

from .base import StateModel
from .players import HowOut, Player, PlayerId
from .innings import Batter, Bowler, FallOfWicket, Inning
from .matches import Match

__all__ = [
    "StateModel",
    "HowOut",
    "Player",
    "PlayerId",
    "Batter",
    "Bowler",
    "FallOfWicket",
    "Inning",
    "Match",
]
