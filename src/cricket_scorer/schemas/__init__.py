"""Pydantic schemas for command validation."""

from .commands import (
    ActiveInningPayload,
    BallType,
    Command,
    DeliveryPayload,
    EmptyPayload,
    FlagPayload,
    NamePayload,
    PlayerPayload,
    RunType,
)

__all__ = [
    "ActiveInningPayload",
    "BallType",
    "Command",
    "DeliveryPayload",
    "EmptyPayload",
    "FlagPayload",
    "NamePayload",
    "PlayerPayload",
    "RunType",
]
