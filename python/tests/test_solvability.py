"""Inversion counting and the parity rule for odd and even sizes."""

from __future__ import annotations

import itertools
from collections import deque

import pytest

from npuzzle.engine.adjacency import adjacent_indexes
from npuzzle.engine.gamesolver import blank_row_from_bottom, count_inversions, is_solvable
from npuzzle.models.configuration import Configuration, build_goal_configuration


# -- helpers ------------------------------------------------------------------


def _board(size: int, tiles: list[int]) -> Configuration:
    return Configuration.from_flat(size, tiles)


def _reachable(size: int) -> set[tuple[int, ...]]:
    """Every board reachable from the goal by legal slides (small sizes only)."""
    start = tuple(build_goal_configuration(size).tiles)
    seen = {start}
    queue = deque([start])
    while queue:
        tiles = queue.popleft()
        blank = tiles.index(0) + 1
        for neighbour in adjacent_indexes(blank, size):
            nxt = list(tiles)
            nxt[blank - 1], nxt[neighbour - 1] = nxt[neighbour - 1], nxt[blank - 1]
            key = tuple(nxt)
            if key not in seen:
                seen.add(key)
                queue.append(key)
    return seen


# -- inversions ---------------------------------------------------------------


@pytest.mark.parametrize(
    "tiles, expected",
    [
        ([1, 2, 3, 4, 5, 6, 7, 8, 0], 0),
        ([1, 2, 3, 4, 5, 6, 8, 7, 0], 1),
        ([8, 7, 6, 5, 4, 3, 2, 1, 0], 28),
        ([0, 8, 7, 6, 5, 4, 3, 2, 1], 28),
        ([2, 0, 1], 1),
    ],
    ids=["goal", "one-swap", "reversed", "reversed-blank-first", "blank-ignored"],
)
def test_count_inversions(tiles: list[int], expected: int) -> None:
    assert count_inversions(tiles) == expected


# -- odd sizes ----------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 5], ids=lambda n: f"{n}x{n}")
def test_goal_is_solvable(size: int) -> None:
    assert is_solvable(build_goal_configuration(size))


def test_odd_size_uses_inversion_parity() -> None:
    assert not is_solvable(_board(3, [1, 2, 3, 4, 5, 6, 8, 7, 0]))
    assert is_solvable(_board(3, [1, 2, 3, 4, 5, 0, 7, 8, 6]))
    assert is_solvable(_board(3, [8, 7, 6, 5, 4, 3, 2, 1, 0]))


# -- even sizes ---------------------------------------------------------------


def test_blank_row_from_bottom() -> None:
    assert blank_row_from_bottom(build_goal_configuration(4)) == 1
    assert blank_row_from_bottom(_board(4, [0, *range(1, 16)])) == 4
    assert blank_row_from_bottom(_board(2, [1, 2, 0, 3])) == 1
    assert blank_row_from_bottom(_board(2, [1, 0, 3, 2])) == 2


def test_even_size_counts_blank_row() -> None:
    # Blank slid up one row: odd inversions, still one move from the goal.
    one_up = _board(4, [*range(1, 12), 0, 13, 14, 15, 12])
    assert count_inversions(one_up.tiles) == 3
    assert is_solvable(one_up)

    # 14 and 15 exchanged: the classic impossible 15-puzzle.
    loyd = _board(4, [*range(1, 14), 15, 14, 0])
    assert not is_solvable(loyd)


def test_2x2_matches_exhaustive_search() -> None:
    reachable = _reachable(2)
    assert len(reachable) == 12
    for perm in itertools.permutations(range(4)):
        assert is_solvable(_board(2, list(perm))) == (perm in reachable), perm


@pytest.mark.timeout(60)
def test_3x3_matches_exhaustive_search() -> None:
    reachable = _reachable(3)
    assert len(reachable) == 181_440
    for perm in itertools.islice(itertools.permutations(range(9)), 0, None, 97):
        assert is_solvable(_board(3, list(perm))) == (perm in reachable), perm
