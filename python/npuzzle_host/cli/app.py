"""Rich terminal host — draws the board and turns typed cell numbers into selections.

The host owns everything presentational: it renders with ``rich``, reads input,
and reacts to the engine's notifications. Game rules live in ``npuzzle``.
"""

from __future__ import annotations

from collections.abc import Callable

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from npuzzle.engine.gamegenerator import SystemRandomSource
from npuzzle.engine.gameplay import PuzzleSession
from npuzzle.models.configuration import EMPTY, Configuration
from npuzzle.models.events import Event, PuzzleSolved, SelectionFeed, TileMoved
from npuzzle.models.settings import SessionSettings

QUIT_WORDS = frozenset({"q", "quit", "exit"})


# -- board rendering ----------------------------------------------------------


def render_board(board: Configuration) -> Table:
    """Return a Rich Table with each cell's number above its tile."""
    width = len(str(board.cell_count))
    table = Table(
        show_header=False,
        show_edge=True,
        show_lines=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            index = r * board.size + c + 1
            label = f"[dim]{index}[/dim]\n"
            if val == EMPTY:
                cells.append(label + "[red]·[/red]")
            elif board.is_tile_correct(index):
                cells.append(label + f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(label + f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def describe(event: Event) -> str:
    if isinstance(event, TileMoved):
        return (
            f"[cyan]Moved[/cyan] tile [bold]{event.tile}[/bold] "
            f"from cell {event.from_index} to cell {event.to_index}"
        )
    if isinstance(event, PuzzleSolved):
        return f"[bold green]★ Solved in {event.moves} moves! ★[/bold green]"
    return ""


# -- input --------------------------------------------------------------------


def parse_selection(raw: str) -> int | None:
    """Return the cell number typed by the player, or None if it is not a number."""
    raw = raw.strip()
    if not raw.lstrip("-").isdigit():
        return None
    return int(raw)


# -- session loop -------------------------------------------------------------


def _draw(console: Console, session: PuzzleSession, status: str) -> None:
    size = session.size
    stats = Text()
    stats.append("Moves: ", style="dim")
    stats.append(str(session.moves), style="bold yellow")

    parts = [Align.center(render_board(session.current)), Align.center(stats)]
    if status:
        parts.append(Align.center(Text.from_markup(status)))

    console.print(
        Panel(
            Group(*parts),
            title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
            border_style="green" if session.is_completed else "bright_blue",
            padding=(1, 2),
        )
    )


def play_session(
    session: PuzzleSession,
    read_line: Callable[[], str],
    console: Console,
) -> bool:
    """Drive *session* from typed input until it is solved or the player quits.

    Returns True if the puzzle was solved.
    """
    feed = SelectionFeed()
    messages: list[str] = []
    session.add_listener(lambda event: messages.append(describe(event)))

    with session.start(feed):
        status = ""
        while not session.is_completed:
            _draw(console, session, status)
            raw = read_line()
            if raw.strip().lower() in QUIT_WORDS:
                session.cancel()
                console.print("[yellow]Puzzle abandoned.[/yellow]")
                return False

            index = parse_selection(raw)
            if index is None:
                status = f"[yellow]Type a cell number 1-{session.current.cell_count} or Q.[/yellow]"
                continue

            before = session.moves
            feed.select(index)
            if messages:
                status = "\n".join(messages)
                messages.clear()
            elif session.moves == before:
                status = f"[dim]Cell {index} cannot move.[/dim]"

        _draw(console, session, status)
    return True


# -- public entry point -------------------------------------------------------


def run(size: int, seed: int | None = None, console: Console | None = None) -> None:
    """Start a shuffled session and play it in the terminal."""
    console = console or Console()
    session = PuzzleSession(SessionSettings(size=size), rng=SystemRandomSource(seed))

    def ask() -> str:
        return Prompt.ask("[bold cyan]Cell to slide[/bold cyan] (Q to quit)", console=console)

    play_session(session, ask, console)
