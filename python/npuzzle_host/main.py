"""Sliding N-puzzle.

Usage::

    npuzzle play                 # 3×3, random shuffle
    npuzzle play -s 4 --seed 7   # reproducible 4×4
    npuzzle shuffle -s 5         # print one shuffled board and exit
"""

from typing import Optional

import typer
from rich.console import Console

from npuzzle.engine.gamegenerator import Shuffler, SystemRandomSource
from npuzzle.engine.gamesolver import count_inversions, is_solvable
from npuzzle.models.settings import DEFAULT_SIZE
from npuzzle_host.cli.app import render_board, run
from npuzzle_host.log import configure_logging

console = Console()

app = typer.Typer(add_completion=False, help="Sliding N-puzzle.")

_SIZE = typer.Option(
    DEFAULT_SIZE, "-s", "--size",
    min=2, max=8,
    help="Grid size (2-8). Odd sizes follow the classic parity rule.",
)
_SEED = typer.Option(
    None, "--seed",
    help="Seed for a reproducible shuffle.",
)
_VERBOSE = typer.Option(
    False, "-v", "--verbose",
    help="Log engine decisions at DEBUG level.",
)


@app.command()
def play(
    size: int = _SIZE,
    seed: Optional[int] = _SEED,
    verbose: bool = _VERBOSE,
) -> None:
    """Play a shuffled puzzle by typing the number of the cell to slide."""
    configure_logging(verbose, console)
    run(size=size, seed=seed, console=console)


@app.command()
def shuffle(
    size: int = _SIZE,
    seed: Optional[int] = _SEED,
    verbose: bool = _VERBOSE,
) -> None:
    """Print one shuffled board with its inversion count."""
    configure_logging(verbose, console)
    board = Shuffler.shuffle(size, SystemRandomSource(seed))
    console.print(render_board(board))
    console.print(
        f"Inversions: [bold]{count_inversions(board.tiles)}[/bold]   "
        f"Solvable: [bold]{is_solvable(board)}[/bold]"
    )
    console.print(f"Tiles: {board.tiles}")


if __name__ == "__main__":
    app()
