"""Cricket Scorer - live match state and delivery scoring."""

from .config import get_settings
from .engine import MatchStateMachine, new_match
from .models import Match

__all__ = ["get_settings", "MatchStateMachine", "new_match", "Match"]
