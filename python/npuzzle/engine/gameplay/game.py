"""Core gameplay logic — validates moves, applies them, and detects the win."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

from npuzzle.engine.adjacency import adjacent_indexes
from npuzzle.engine.gamegenerator import RandomSource, Shuffler
from npuzzle.engine.gameplay.guard import ResourceGuard
from npuzzle.engine.gamestate import Phase, SessionState
from npuzzle.models.configuration import (
    EMPTY,
    Configuration,
    build_goal_configuration,
    equals,
)
from npuzzle.models.errors import ConfigurationError, InvalidIndex
from npuzzle.models.events import (
    Event,
    Listener,
    MoveResult,
    PuzzleSolved,
    RejectReason,
    SelectionSource,
    TileMoved,
)
from npuzzle.models.settings import SessionSettings

logger = logging.getLogger(__name__)


class PuzzleSession:
    """Orchestrates a single puzzle session.

    The session owns the goal and current configurations. Hosts drive it by
    calling :meth:`attempt_move` directly or by connecting a selection source
    with :meth:`start`, and observe it through listeners registered with
    :meth:`add_listener`.

    Use the session as a context manager (or call :meth:`close`) so the
    selection subscription is released on every exit path.
    """

    def __init__(
        self,
        settings: SessionSettings | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        settings = settings or SessionSettings()
        self._setup(settings, Shuffler.shuffle(settings.size, rng))

    @classmethod
    def from_configuration(
        cls,
        configuration: Configuration,
        settings: SessionSettings | None = None,
    ) -> PuzzleSession:
        """Create a session from an existing board instead of a fresh shuffle."""
        settings = settings or SessionSettings(size=configuration.size)
        if settings.size != configuration.size:
            raise ConfigurationError(
                f"Board is {configuration.size}×{configuration.size} but the "
                f"session expects {settings.size}×{settings.size}."
            )
        board = Configuration.from_flat(configuration.size, configuration.tiles)
        if equals(board, build_goal_configuration(board.size)):
            raise ConfigurationError("A session cannot start from the solved board.")
        obj = object.__new__(cls)
        obj._setup(settings, board)
        return obj

    def _setup(self, settings: SessionSettings, board: Configuration) -> None:
        self.settings = settings
        self.size = settings.size
        self.goal = build_goal_configuration(self.size)
        self.state = SessionState(board)
        self._listeners: list[Listener] = []
        self._guard = ResourceGuard()

    # -- wiring ---------------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def start(self, source: SelectionSource) -> PuzzleSession:
        """Subscribe to *source*; the subscription lives until the session ends."""
        subscription = source.subscribe(self._on_selection)
        self._guard.give(subscription.close)
        return self

    def _on_selection(self, index: int) -> None:
        try:
            self.attempt_move(index)
        except InvalidIndex as exc:
            logger.warning("Ignoring selection: %s", exc)

    def _emit(self, event: Event) -> None:
        for listener in list(self._listeners):
            listener(event)

    # -- movement -------------------------------------------------------------

    def attempt_move(self, selected_index: int) -> MoveResult:
        """Slide the tile at *selected_index* into the adjacent empty cell.

        Raises :class:`InvalidIndex` for indexes outside ``1..size²``.
        A selection that does not touch the empty cell is rejected without
        changing the board.
        """
        board = self.state.configuration
        board.check_index(selected_index)

        if self.state.is_terminal:
            return MoveResult.rejected(RejectReason.SESSION_CLOSED)

        empty_index = next(
            (i for i in adjacent_indexes(selected_index, self.size) if board.tile_at(i) == EMPTY),
            None,
        )
        if empty_index is None:
            logger.debug("Cell %d is not next to the empty cell", selected_index)
            return MoveResult.rejected(RejectReason.NOT_ADJACENT_TO_EMPTY)

        tile = board.tile_at(selected_index)
        board.swap(selected_index, empty_index)
        self.state.increment_moves()

        moved = TileMoved(tile=tile, from_index=selected_index, to_index=empty_index)
        logger.debug("Tile %d moved %d -> %d", tile, selected_index, empty_index)
        solved = equals(board, self.goal)
        try:
            self._emit(moved)
        finally:
            # Completion runs even when a listener raises.
            if solved:
                self._complete()
        return MoveResult.applied(moved, solved=solved)

    def _complete(self) -> None:
        self.state.finish(Phase.COMPLETED)
        logger.info("Puzzle solved in %d moves", self.state.moves)
        try:
            self._emit(PuzzleSolved(moves=self.state.moves))
        finally:
            self._guard.close()
        if self.settings.on_completed is not None:
            self.settings.on_completed()

    # -- lifecycle ------------------------------------------------------------

    def cancel(self) -> None:
        """End the session early. Safe to call any number of times."""
        if not self.state.is_terminal:
            self.state.finish(Phase.CANCELLED)
            logger.info("Puzzle cancelled after %d moves", self.state.moves)
        self._guard.close()

    close = cancel

    def __enter__(self) -> PuzzleSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # -- queries --------------------------------------------------------------

    @property
    def current(self) -> Configuration:
        return self.state.configuration

    @property
    def moves(self) -> int:
        return self.state.moves

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def is_completed(self) -> bool:
        return self.state.phase is Phase.COMPLETED

    @property
    def released(self) -> bool:
        return self._guard.closed

    def placement_of(self, tile: int) -> Any:
        """Return the host placement of the cell *tile* currently occupies."""
        if self.settings.placements is None:
            raise ConfigurationError("No placements were registered for this session.")
        return self.settings.placements[self.current.index_of(tile)]
