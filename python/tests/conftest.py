"""Shared fixtures: scripted randomness, selection feeds, ready-made sessions."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from npuzzle.engine.gameplay import PuzzleSession
from npuzzle.models.configuration import Configuration
from npuzzle.models.events import Event, SelectionFeed
from npuzzle.models.settings import SessionSettings

# One move (cell 9 -> cell 6) away from the 3×3 goal.
ONE_MOVE_FROM_GOAL = [1, 2, 3, 4, 5, 0, 7, 8, 6]


class ScriptedRandom:
    """Random source replaying a fixed list of draws and recording the bounds."""

    def __init__(self, draws: Iterable[int]) -> None:
        self._draws = iter(draws)
        self.calls: list[tuple[int, int]] = []

    def next_int(self, lo: int, hi: int) -> int:
        self.calls.append((lo, hi))
        value = next(self._draws)
        assert lo <= value <= hi, f"scripted draw {value} outside [{lo}, {hi}]"
        return value


class AlwaysHigh:
    """Draws the upper bound every time, so Fisher–Yates leaves the board untouched."""

    def next_int(self, lo: int, hi: int) -> int:
        return hi


@pytest.fixture
def scripted() -> type[ScriptedRandom]:
    return ScriptedRandom


@pytest.fixture
def always_high() -> AlwaysHigh:
    return AlwaysHigh()


@pytest.fixture
def feed() -> SelectionFeed:
    return SelectionFeed()


@pytest.fixture
def make_session() -> Callable[..., PuzzleSession]:
    def _make(tiles: list[int], size: int = 3, **settings) -> PuzzleSession:
        board = Configuration.from_flat(size, tiles)
        return PuzzleSession.from_configuration(
            board, SessionSettings(size=size, **settings)
        )

    return _make


@pytest.fixture
def near_goal(make_session) -> PuzzleSession:
    return make_session(ONE_MOVE_FROM_GOAL)


@pytest.fixture
def events() -> list[Event]:
    return []
