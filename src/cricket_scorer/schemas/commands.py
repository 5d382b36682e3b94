"""Pydantic schemas for command payload validation."""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..models import Player


class BallType(str, Enum):
    """Enumeration of delivery kinds."""
    LEGAL = "legal"
    NO_BALL = "noBall"
    WIDE = "wide"


class RunType(str, Enum):
    """Enumeration of how the runs off a delivery are credited."""
    BAT = "bat"
    BYES = "byes"
    LEG_BYES = "legByes"


class PayloadBase(BaseModel):
    """Base payload schema; accepts camelCase or snake_case keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


class EmptyPayload(PayloadBase):
    """Payload for commands that carry no data."""
    pass


class DeliveryPayload(PayloadBase):
    """Outcome of a single ball."""

    ball_type: BallType = Field(..., description="legal, noBall or wide")
    boundary: bool = Field(False, description="Whether the shot reached the boundary")
    run_type: RunType = Field(..., description="bat, byes or legByes")
    runs: int = Field(..., ge=0, description="Runs run, excluding the no-ball/wide penalty")


class ActiveInningPayload(PayloadBase):
    value: int = Field(..., ge=0, le=3, description="Inning index (0-3)")


class FlagPayload(PayloadBase):
    value: bool

    @field_validator("value", mode="before")
    @classmethod
    def validate_strict_bool(cls, v):
        """Reject truthy strings and numbers; only real booleans are flags."""
        if not isinstance(v, bool):
            raise ValueError("value must be a boolean")
        return v


class NamePayload(PayloadBase):
    value: str


class PlayerPayload(PayloadBase):
    player: Player


class Command(BaseModel):
    """Envelope for a named command: ``{"type": ..., "payload": {...}}``."""

    type: str = Field(..., min_length=1, description="Command name, e.g. delivery")
    payload: Dict[str, Any] = Field(default_factory=dict)
