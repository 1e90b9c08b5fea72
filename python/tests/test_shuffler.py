"""Shuffler — Fisher–Yates draws, rejection of unsolvable and solved boards."""

from __future__ import annotations

import pytest

from npuzzle.engine.gamegenerator import Shuffler, SystemRandomSource
from npuzzle.engine.gamesolver import count_inversions, is_solvable
from npuzzle.models.configuration import build_goal_configuration
from npuzzle.models.errors import ConfigurationError, ShuffleError


# -- Fisher–Yates -------------------------------------------------------------


def test_fisher_yates_draw_bounds(scripted) -> None:
    rng = scripted([5, 4, 3, 2])
    numbers = [1, 2, 3, 4, 0]
    Shuffler.fisher_yates(numbers, rng)
    assert rng.calls == [(1, 5), (1, 4), (1, 3), (1, 2)]
    assert numbers == [1, 2, 3, 4, 0]


def test_fisher_yates_swaps_one_based_positions(scripted) -> None:
    numbers = [1, 2, 3, 0]
    Shuffler.fisher_yates(numbers, scripted([1, 3, 2]))
    assert numbers == [0, 2, 3, 1]


# -- shuffle ------------------------------------------------------------------


def test_shuffle_retries_until_usable(scripted) -> None:
    rng = scripted(
        [
            4, 3, 2,  # identity: the goal itself
            1, 3, 2,  # [0, 2, 3, 1]: unsolvable
            4, 3, 1,  # [2, 1, 3, 0]: unsolvable
            3, 3, 2,  # [1, 2, 0, 3]: one slide from the goal
        ]
    )
    board = Shuffler.shuffle(2, rng)
    assert board.tiles == [1, 2, 0, 3]
    assert rng.calls == [(1, 4), (1, 3), (1, 2)] * 4


def test_shuffle_is_reproducible_with_seed() -> None:
    a = Shuffler.shuffle(3, SystemRandomSource(1234))
    b = Shuffler.shuffle(3, SystemRandomSource(1234))
    assert a == b


@pytest.mark.parametrize("size", [2, 3, 4, 5], ids=lambda n: f"{n}x{n}")
def test_shuffle_properties(size: int) -> None:
    goal = build_goal_configuration(size)
    for seed in range(200):
        board = Shuffler.shuffle(size, SystemRandomSource(seed))
        assert board.size == size
        assert sorted(board.tiles) == list(range(size * size))
        assert board != goal
        assert is_solvable(board)
        if size % 2 == 1:
            assert count_inversions(board.tiles) % 2 == 0


def test_shuffle_without_rng_uses_system_source() -> None:
    board = Shuffler.shuffle(3)
    assert is_solvable(board)
    assert board != build_goal_configuration(3)


def test_shuffle_gives_up_after_max_attempts(always_high) -> None:
    with pytest.raises(ShuffleError, match="3 attempts"):
        Shuffler.shuffle(3, always_high, max_attempts=3)


def test_shuffle_rejects_bad_arguments() -> None:
    with pytest.raises(ConfigurationError):
        Shuffler.shuffle(1)
    with pytest.raises(ConfigurationError):
        Shuffler.shuffle(3, max_attempts=0)


def test_shuffle_reaches_many_boards() -> None:
    rng = SystemRandomSource(7)
    seen = {tuple(Shuffler.shuffle(3, rng).tiles) for _ in range(300)}
    assert len(seen) > 250
