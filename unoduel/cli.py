"""CLI entry point."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import typer
from dotenv import load_dotenv

from unoduel.config import Settings

if TYPE_CHECKING:
    from unoduel.engine import MatchView

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Wagered UNO against a bot")

PLAYER_ID = "local"


class ConsoleSink:
    """Prints snapshots and messages to the terminal."""

    def publish(self, player_id: str, view: MatchView) -> None:
        typer.echo("")
        typer.echo(f"Top card: {view.current_color.value} {view.current_value}")
        typer.echo("Your hand: " + (", ".join(str(c) for c in view.my_hand) or "(empty)"))
        typer.echo(f"Bot cards: {view.opponent_hand_size}")
        if view.winner is None:
            typer.echo("Turn: " + ("Your move" if view.turn.value == "player" else "Bot's move"))

    def notify(self, player_id: str, text: str) -> None:
        typer.echo(f"> {text}")


def _setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def play(
    bet: int = typer.Option(10, "--bet", "-b", help="Wager for the match"),
    advantage: bool = typer.Option(
        False,
        "--advantage",
        help="Soften the bot: it picks a random legal card instead of its best one",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Play one match in the terminal. Type 'help' for commands."""
    from unoduel.engine import GameError
    from unoduel.orchestration import InMemoryLedger, MatchService

    settings = Settings.from_env()
    _setup_logging(settings)
    ledger = InMemoryLedger(settings.starting_balance)
    service = MatchService(ledger, ConsoleSink(), settings=settings, seed=seed)

    try:
        service.start_match(PLAYER_ID, bet, advantage=advantage, seed=seed)
    except GameError as e:
        raise typer.BadParameter(str(e))

    while PLAYER_ID in service.registry:
        try:
            text = typer.prompt("uno")
        except (EOFError, typer.Abort):
            service.forfeit(PLAYER_ID)
            break
        service.handle(PLAYER_ID, text)

    typer.echo(f"Balance: ${ledger.balance(PLAYER_ID)}")


@app.command()
def simulate(
    games: int = typer.Option(100, "--games", "-g", help="Number of matches"),
    advantage: bool = typer.Option(False, "--advantage", help="Soften the bot"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Run many matches of a random player against the bot."""
    from unoduel.agents import RandomAgent
    from unoduel.orchestration import run_simulation

    if games <= 0:
        raise typer.BadParameter("--games must be positive")
    _setup_logging(Settings.from_env())

    results = run_simulation(RandomAgent(seed=seed), num_games=games, seed=seed, advantage=advantage)
    typer.echo("Simulation results:")
    for side, count in sorted(results.items(), key=lambda x: -x[1]):
        typer.echo(f"  {side}: {count}")


if __name__ == "__main__":
    app()
