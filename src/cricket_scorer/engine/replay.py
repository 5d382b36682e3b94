"""Replay a recorded command log against a match."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from ..models import Match
from ..schemas import Command
from .errors import ReplayError, ReplayLoadError, ScoringError
from .state_machine import MatchStateMachine, new_match


class ReplayDocument(BaseModel):
    """A starting snapshot plus the commands to apply to it, in order."""

    match: Optional[Match] = None
    commands: List[Command] = Field(default_factory=list)


def load_replay(path: Union[str, Path]) -> ReplayDocument:
    """Read and validate a replay document from a JSON file."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ReplayLoadError(f"cannot read {path}: {e}") from e
    doc = ReplayDocument.model_validate(raw)
    logger.info(f"loaded replay path={path} commands={len(doc.commands)} snapshot={doc.match is not None}")
    return doc


def replay(document: Union[ReplayDocument, Dict[str, Any]]) -> Match:
    """Apply every command of ``document`` and return the resulting match."""
    if not isinstance(document, ReplayDocument):
        document = ReplayDocument.model_validate(document)

    match = document.match.model_copy(deep=True) if document.match is not None else new_match()
    machine = MatchStateMachine(match)
    for index, command in enumerate(document.commands):
        try:
            machine.dispatch(command)
        except (ScoringError, ValidationError, ValueError) as e:
            raise ReplayError(index, f"{command.type} failed: {e}") from e

    logger.info(f"replay finished commands={len(document.commands)} innings={len(match.innings)}")
    return match
