"""Inversion parity and the solvability test built on it."""

from __future__ import annotations

from collections.abc import Sequence

from npuzzle.models.configuration import EMPTY, Configuration


def count_inversions(tiles: Sequence[int]) -> int:
    """Count pairs ``i < j`` of nonzero tiles with ``tiles[i] > tiles[j]``."""
    numbers = [t for t in tiles if t != EMPTY]
    inversions = 0
    for i, a in enumerate(numbers):
        for b in numbers[i + 1 :]:
            if a > b:
                inversions += 1
    return inversions


def blank_row_from_bottom(configuration: Configuration) -> int:
    """Row of the empty cell, counted 1-based from the bottom."""
    row_from_top = (configuration.empty_index - 1) // configuration.size
    return configuration.size - row_from_top


def is_solvable(configuration: Configuration) -> bool:
    """Return True if *configuration* can reach the goal by legal slides.

    Odd sizes: the inversion count must be even.
    Even sizes: inversions plus the blank's row from the bottom must be odd.
    """
    inversions = count_inversions(configuration.tiles)
    if configuration.size % 2 == 1:
        return inversions % 2 == 0
    return (inversions + blank_row_from_bottom(configuration)) % 2 == 1
