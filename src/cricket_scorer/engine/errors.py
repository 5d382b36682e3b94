"""Exceptions raised by the scoring engine."""


class ScoringError(Exception):
    """Base exception for scoring engine errors."""
    pass


class PreconditionError(ScoringError):
    """An operation was applied to a match that is not ready for it."""
    pass


class UnknownCommandError(ScoringError):
    """A command name has no registered handler."""
    pass


class CommandValidationError(ScoringError):
    """A command payload failed schema validation."""
    pass


class ReplayError(ScoringError):
    """A command in a replay log could not be applied."""

    def __init__(self, index: int, message: str):
        super().__init__(f"command #{index}: {message}")
        self.index = index


class ReplayLoadError(ScoringError):
    """A replay log could not be read or parsed."""
    pass
