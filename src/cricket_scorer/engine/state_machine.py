"""Delivery-scoring state machine.

Applies discrete scoring events to a single in-memory ``Match``:

- delivery: batter, bowler and extras figures for one ball
- over / swapStrike: end-of-over and manual rotations
- setActiveInning, setFollowOn, setTeam{1,2}Name, setTeam{1,2}Player

Every operation mutates the match in place and runs to completion before
the next one starts; callers serialize events.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type, Union

from loguru import logger
from pydantic import ValidationError

from ..config import Settings, get_settings
from ..models import Batter, Bowler, Inning, Match, Player
from ..schemas import (
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
from ..schemas.commands import PayloadBase
from .errors import CommandValidationError, PreconditionError, UnknownCommandError


def new_match(settings: Optional[Settings] = None) -> Match:
    """Build the initial match state from configured defaults."""
    cfg = (settings or get_settings()).match
    return Match(
        balls_per_over=cfg.balls_per_over,
        innings_per_side=cfg.innings_per_side,
        players_per_side=cfg.players_per_side,
        no_balls_as_balls_faced=cfg.no_balls_as_balls_faced,
        wides_as_balls_faced=cfg.wides_as_balls_faced,
    )


class MatchStateMachine:
    """Owns a ``Match`` and applies scoring commands to it."""

    def __init__(self, match: Optional[Match] = None):
        self.match = match if match is not None else new_match()

    # ------------------------------------------------------------------
    # Precondition helpers
    # ------------------------------------------------------------------

    def _active_inning(self) -> Inning:
        index = self.match.active_inning
        if index >= len(self.match.innings):
            raise PreconditionError(
                f"active inning {index} does not exist ({len(self.match.innings)} innings recorded)"
            )
        return self.match.innings[index]

    def _striker_and_bowler(self, inning: Inning) -> Tuple[Batter, Bowler]:
        batter = inning.batters.get(inning.batter_on_strike) if inning.batter_on_strike else None
        if batter is None:
            raise PreconditionError(f"batter on strike {inning.batter_on_strike!r} has no batting entry")
        bowler = inning.bowlers.get(inning.bowler_current) if inning.bowler_current else None
        if bowler is None:
            raise PreconditionError(f"current bowler {inning.bowler_current!r} has no bowling entry")
        return batter, bowler

    @staticmethod
    def _rotate_strike(inning: Inning) -> None:
        inning.batter_on_strike, inning.batter_off_strike = inning.batter_off_strike, inning.batter_on_strike

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def delivery(
        self,
        ball_type: Union[BallType, str],
        boundary: bool,
        run_type: Union[RunType, str],
        runs: int,
    ) -> None:
        """Score one ball against the active inning."""
        ball_type = BallType(ball_type)
        run_type = RunType(run_type)
        if runs < 0:
            raise ValueError(f"runs must be non-negative, got {runs}")

        inning = self._active_inning()
        batter, bowler = self._striker_and_bowler(inning)

        # 1) Runs off the bat
        if run_type == RunType.BAT:
            batter.runs += runs
            if boundary and runs == 4:
                batter.fours += 1
            elif boundary and runs == 6:
                batter.sixes += 1

        # 2) Balls faced
        if (
            ball_type == BallType.LEGAL
            or (ball_type == BallType.NO_BALL and self.match.no_balls_as_balls_faced)
            or (ball_type == BallType.WIDE and self.match.wides_as_balls_faced)
        ):
            batter.balls_faced += 1

        # 3) Odd runs cross the batters, whoever is credited
        if runs % 2 == 1:
            self._rotate_strike(inning)

        # 4) Bowler figures
        if ball_type == BallType.LEGAL:
            bowler.balls += 1
            if run_type == RunType.BAT:
                bowler.runs += runs
        elif ball_type == BallType.NO_BALL:
            bowler.no_balls += 1
            bowler.runs += runs + 1
        else:
            bowler.wides += 1
            bowler.runs += runs + 1

        # 5) Extras, exactly one branch
        if ball_type == BallType.LEGAL and run_type == RunType.BYES:
            inning.byes += runs
        elif ball_type == BallType.LEGAL and run_type == RunType.LEG_BYES:
            inning.leg_byes += runs
        elif ball_type == BallType.NO_BALL:
            inning.no_balls += 1 if run_type == RunType.BAT else runs + 1
        elif ball_type == BallType.WIDE:
            inning.wides += runs + 1

    def over(self) -> None:
        """End the over: batters and bowling ends change."""
        inning = self._active_inning()
        self._rotate_strike(inning)
        inning.bowler_current, inning.bowler_previous = inning.bowler_previous, inning.bowler_current

    def swap_strike(self) -> None:
        """Exchange the striker and non-striker."""
        self._rotate_strike(self._active_inning())

    def set_active_inning(self, value: int) -> None:
        self.match.active_inning = value

    def set_follow_on(self, value: bool) -> None:
        self.match.follow_on = value

    def set_team1_name(self, value: str) -> None:
        self.match.team1_name = value

    def set_team2_name(self, value: str) -> None:
        self.match.team2_name = value

    def set_team1_player(self, player: Player) -> None:
        self.match.team1_players[player.id] = player

    def set_team2_player(self, player: Player) -> None:
        self.match.team2_players[player.id] = player

    # ------------------------------------------------------------------
    # Command dispatch
    # ------------------------------------------------------------------

    def dispatch(self, command: Union[Command, Mapping[str, Any]]) -> Match:
        """Validate and apply a named command, returning the mutated match."""
        if not isinstance(command, Command):
            try:
                command = Command.model_validate(command)
            except ValidationError as e:
                raise CommandValidationError(f"malformed command: {e}") from e

        entry = COMMANDS.get(command.type)
        if entry is None:
            raise UnknownCommandError(f"unknown command {command.type!r}")
        schema, apply = entry

        try:
            payload = schema.model_validate(command.payload)
        except ValidationError as e:
            raise CommandValidationError(f"invalid payload for {command.type}: {e}") from e

        apply(self, payload)
        logger.debug(f"applied command={command.type} payload={command.payload} active_inning={self.match.active_inning}")
        return self.match


def _apply_delivery(machine: MatchStateMachine, p: DeliveryPayload) -> None:
    machine.delivery(p.ball_type, p.boundary, p.run_type, p.runs)


CommandHandler = Callable[[MatchStateMachine, Any], None]

# command name -> (payload schema, handler)
COMMANDS: Dict[str, Tuple[Type[PayloadBase], CommandHandler]] = {
    "delivery": (DeliveryPayload, _apply_delivery),
    "over": (EmptyPayload, lambda m, p: m.over()),
    "setActiveInning": (ActiveInningPayload, lambda m, p: m.set_active_inning(p.value)),
    "setFollowOn": (FlagPayload, lambda m, p: m.set_follow_on(p.value)),
    "setTeam1Name": (NamePayload, lambda m, p: m.set_team1_name(p.value)),
    "setTeam1Player": (PlayerPayload, lambda m, p: m.set_team1_player(p.player)),
    "setTeam2Name": (NamePayload, lambda m, p: m.set_team2_name(p.value)),
    "setTeam2Player": (PlayerPayload, lambda m, p: m.set_team2_player(p.player)),
    "swapStrike": (EmptyPayload, lambda m, p: m.swap_strike()),
}
