"""Main CLI interface for the cricket scoring system."""

import json
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..config import get_settings
from ..engine import ScoringError, load_replay, new_match, replay as replay_document
from ..models import Inning, Match

# Initialize rich consoles; log records go to stderr
console = Console()
err_console = Console(stderr=True)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Route loguru output through rich, plus an optional file."""
    logger.remove()
    logger.add(
        RichHandler(console=err_console, show_time=True, show_path=False),
        level=level.upper(),
        format="{message}",
    )
    if log_file:
        logger.add(log_file, level=level.upper())


app = typer.Typer(
    name="cricket-scorer",
    help="Cricket Scorer - live match state and delivery scoring",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Log file path"),
):
    """Cricket Scorer - live match state and delivery scoring."""
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]❌ Invalid settings: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    log_level = "DEBUG" if verbose else settings.logging.level
    setup_logging(log_level, log_file or settings.logging.file)


def _player_name(match: Match, player_id: Optional[str]) -> str:
    if player_id is None:
        return "-"
    player = match.team1_players.get(player_id) or match.team2_players.get(player_id)
    return player.name if player else player_id


def _batting_table(match: Match, inning: Inning) -> Table:
    table = Table(title=f"Batting - inning {match.active_inning + 1}")
    table.add_column("Batter", style="cyan")
    table.add_column("How out", style="magenta")
    table.add_column("R", justify="right", style="green")
    table.add_column("B", justify="right")
    table.add_column("4s", justify="right")
    table.add_column("6s", justify="right")
    table.add_column("SR", justify="right", style="yellow")
    for player_id in inning.batting_order:
        batter = inning.batters.get(player_id)
        if batter is None:
            continue
        name = _player_name(match, player_id)
        if player_id == inning.batter_on_strike:
            name += " *"
        table.add_row(
            name,
            batter.how_out.value,
            str(batter.runs),
            str(batter.balls_faced),
            str(batter.fours),
            str(batter.sixes),
            f"{batter.strike_rate:.2f}",
        )
    return table


def _bowling_table(match: Match, inning: Inning) -> Table:
    table = Table(title="Bowling")
    table.add_column("Bowler", style="cyan")
    table.add_column("O", justify="right")
    table.add_column("M", justify="right")
    table.add_column("R", justify="right", style="green")
    table.add_column("NB", justify="right")
    table.add_column("WD", justify="right")
    table.add_column("Econ", justify="right", style="yellow")
    for player_id in inning.bowling_order:
        bowler = inning.bowlers.get(player_id)
        if bowler is None:
            continue
        table.add_row(
            _player_name(match, player_id),
            bowler.overs(match.balls_per_over),
            str(bowler.maidens),
            str(bowler.runs),
            str(bowler.no_balls),
            str(bowler.wides),
            f"{bowler.economy(match.balls_per_over):.2f}",
        )
    return table


def _print_scorecard(match: Match) -> None:
    if match.active_inning >= len(match.innings):
        console.print("[yellow]No active inning to show[/yellow]")
        return
    inning = match.current_inning
    console.print(_batting_table(match, inning))
    console.print(_bowling_table(match, inning))
    console.print(
        f"Extras: {inning.total_extras} "
        f"(b {inning.byes}, lb {inning.leg_byes}, nb {inning.no_balls}, w {inning.wides}, p {inning.penalties})"
    )
    complete, balls = divmod(inning.legal_balls, match.balls_per_over)
    console.print(f"[bold]Total: {inning.total_runs}/{inning.wickets} ({complete}.{balls} overs)[/bold]")


@app.command("replay")
def replay(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON command log to replay"),
    json_out: bool = typer.Option(False, "--json", help="Output the final match as JSON"),
):
    """Replay a command log and show the resulting scorecard."""
    try:
        match = replay_document(load_replay(path))
    except (ScoringError, ValidationError) as e:
        console.print(f"[red]❌ Replay failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if json_out:
        typer.echo(json.dumps(match.to_dict(), indent=2))
        return
    _print_scorecard(match)


@app.command("init")
def init(json_out: bool = typer.Option(False, "--json", help="Output the match as JSON")):
    """Show the initial match state built from settings."""
    match = new_match(get_settings())

    if json_out:
        typer.echo(json.dumps(match.to_dict(), indent=2))
        return

    table = Table(title="Match settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Balls per over", str(match.balls_per_over))
    table.add_row("Innings per side", str(match.innings_per_side))
    table.add_row("Players per side", str(match.players_per_side))
    table.add_row("No-balls as balls faced", str(match.no_balls_as_balls_faced))
    table.add_row("Wides as balls faced", str(match.wides_as_balls_faced))
    console.print(table)


if __name__ == "__main__":
    app()
