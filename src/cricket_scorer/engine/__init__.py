"""Scoring engine: state machine, command dispatch and replay."""

from .errors import (
    CommandValidationError,
    PreconditionError,
    ReplayError,
    ReplayLoadError,
    ScoringError,
    UnknownCommandError,
)
from .state_machine import COMMANDS, MatchStateMachine, new_match
from .replay import ReplayDocument, load_replay, replay

__all__ = [
    "COMMANDS",
    "CommandValidationError",
    "MatchStateMachine",
    "PreconditionError",
    "ReplayDocument",
    "ReplayError",
    "ReplayLoadError",
    "ScoringError",
    "UnknownCommandError",
    "load_replay",
    "new_match",
    "replay",
]
