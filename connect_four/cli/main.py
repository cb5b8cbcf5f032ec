"""
CLI harness for the Connect Four engine.

Usage:
    python -m connect_four --help
    python -m connect_four run 0 6 0 6 0 6 0
    echo "3,4,3,4" | python -m connect_four run --width 5 --height 5
    python -m connect_four play
"""

import logging
import re
from typing import Annotated

import typer
from pydantic import ValidationError

from ..core.config import Settings, get_settings
from ..core.errors import GameError
from ..core.types import GameState, MoveOutcome
from ..game.engine import GameEngine


logger = logging.getLogger(__name__)

app = typer.Typer(
    name="connect4",
    help="Connect Four rules engine CLI.",
    add_completion=False,
)

_TOKEN_SEPARATORS = re.compile(r"[\s,]+")


def board_to_ascii(state: GameState) -> str:
    """Convert board to ASCII display."""
    board = state.board
    first, second = state.players
    symbols = {first: "X", second: "O", None: " "}

    lines = []
    lines.append("\n " + " ".join(f"{c:^3}" for c in range(board.width)))
    lines.append("+" + "---+" * board.width)
    for row in board.grid:
        lines.append("|" + "|".join(f" {symbols[cell]} " for cell in row) + "|")
        lines.append("+" + "---+" * board.width)
    lines.append(f"X = {first}, O = {second}")

    return "\n".join(lines)


def parse_moves(tokens: list[str]) -> list[int]:
    """Split raw tokens on commas/whitespace and convert to column indices.

    Raises:
        ValueError: If a token is not an integer
    """
    moves = []
    for token in tokens:
        for part in _TOKEN_SEPARATORS.split(token.strip()):
            if not part:
                continue
            try:
                moves.append(int(part))
            except ValueError as e:
                raise ValueError(f"Malformed move '{part}' (expected a column number)") from e
    return moves


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        typer.echo(f"Error: invalid configuration: {e}", err=True)
        raise typer.Exit(1) from e


def _new_engine(height: int | None, width: int | None) -> GameEngine:
    return GameEngine.from_settings(_load_settings(), height=height, width=width)


def _configure_logging(log_level: str | None) -> None:
    settings = _load_settings()
    try:
        settings.log.configure(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


def _print_outcome(number: int, outcome: MoveOutcome) -> None:
    typer.echo(f"Move {number}: {outcome.describe()}")


@app.command()
def run(
    moves: Annotated[list[str] | None, typer.Argument(help="Column indices; read from stdin if omitted")] = None,
    height: Annotated[int | None, typer.Option("--height", help="Board rows")] = None,
    width: Annotated[int | None, typer.Option("--width", help="Board columns")] = None,
    log_level: Annotated[str | None, typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
):
    """
    Feed a sequence of columns to a new game and print each outcome.

    Exits 0 once the game is won or tied, or the input runs out.
    Exits 1 on malformed input (non-integer, invalid column, full column).
    """
    _configure_logging(log_level)

    try:
        engine = _new_engine(height, width)
    except GameError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    if not moves:
        moves = [typer.get_text_stream("stdin").read()]

    try:
        columns = parse_moves(moves)
    except ValueError as e:
        logger.warning("Rejected input: %s", e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    logger.info("Starting %dx%d game with %d moves", engine.height, engine.width, len(columns))

    for number, column in enumerate(columns, start=1):
        try:
            outcome = engine.submit_move(column)
        except GameError as e:
            logger.warning("Rejected move %d: %s", number, e)
            typer.echo(f"Move {number}: error: {e}", err=True)
            typer.echo(board_to_ascii(engine.state))
            raise typer.Exit(1) from e

        _print_outcome(number, outcome)
        if outcome.is_terminal:
            remaining = len(columns) - number
            if remaining:
                logger.info("Game over; ignoring %d remaining moves", remaining)
            break

    logger.info("Game finished with status %s", engine.status.name)
    typer.echo(board_to_ascii(engine.state))


@app.command()
def play(
    height: Annotated[int | None, typer.Option("--height", help="Board rows")] = None,
    width: Annotated[int | None, typer.Option("--width", help="Board columns")] = None,
    log_level: Annotated[str | None, typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
):
    """
    Play an interactive two-player game in the terminal.

    Enter a column number to drop a piece, 'q' to quit.
    """
    _configure_logging(log_level)

    try:
        engine = _new_engine(height, width)
    except GameError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo("\n" + "=" * 40)
    typer.echo("  CONNECT FOUR")
    typer.echo("=" * 40)
    typer.echo(f"\nEnter column number (0-{engine.width - 1}) to play, 'q' to quit\n")

    while not engine.is_game_over:
        typer.echo(board_to_ascii(engine.state))
        try:
            user_input = typer.prompt(f"\n{engine.current_player} player's move")
        except (KeyboardInterrupt, typer.Abort):
            typer.echo("\nGame quit.")
            return

        if user_input.strip().lower() == "q":
            typer.echo("Game quit.")
            return

        try:
            col = int(user_input)
            outcome = engine.submit_move(col)
        except ValueError as e:
            # InvalidColumn and ColumnFull are ValueErrors too
            message = str(e) if isinstance(e, GameError) else f"Enter a number 0-{engine.width - 1}"
            typer.echo(f"Invalid! {message}. Legal moves: {engine.legal_moves()}")
            continue

        if outcome.is_terminal:
            typer.echo(board_to_ascii(engine.state))
            typer.echo(f"\n{outcome.describe()}")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
