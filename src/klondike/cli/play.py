"""CLI command for playing Klondike in the terminal."""

from __future__ import annotations

import logging

import click

from klondike.playtest.display import BoardRenderer
from klondike.playtest.runner import PlaySession
from klondike.rules.solver import DEFAULT_SOLVE_INTERVAL
from klondike.session import DrawMode, GameSession, SessionConfig

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "-d", "--draw-mode",
    type=click.Choice(["1", "3"]),
    default="1",
    help="Cards turned over per draw",
)
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option(
    "--solve-interval",
    type=float,
    default=DEFAULT_SOLVE_INTERVAL,
    help="Seconds between auto-solve moves",
)
@click.option("--show", is_flag=True, help="Print the opening deal and exit")
@click.option("--debug", is_flag=True, help="Reveal face-down cards and deck order")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    draw_mode: str,
    seed: int | None,
    solve_interval: float,
    show: bool,
    debug: bool,
    verbose: bool,
):
    """Play a game of Klondike solitaire."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    if solve_interval <= 0:
        raise click.BadParameter("must be positive", param_hint="--solve-interval")

    config = SessionConfig(
        draw_mode=DrawMode(int(draw_mode)),
        solve_interval=solve_interval,
        seed=seed,
        debug=debug,
    )
    session = GameSession(config)
    session.new_deal()

    if show:
        click.echo(BoardRenderer().render(session.snapshot(), debug))
        return

    runner = PlaySession(session)
    try:
        result = runner.run(output_fn=click.echo)
    except KeyboardInterrupt:
        click.echo("\n\nGame interrupted.")
        return

    if result.won:
        click.echo(f"\nWon in {result.moves} moves.")
    click.echo("\nThanks for playing!")


if __name__ == "__main__":
    main()
