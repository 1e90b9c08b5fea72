"""Generates shuffled, solvable sliding puzzle boards."""

from __future__ import annotations

import logging

from npuzzle.engine.gamegenerator.randomness import RandomSource, SystemRandomSource
from npuzzle.engine.gamesolver import is_solvable
from npuzzle.models.configuration import Configuration, build_goal_configuration
from npuzzle.models.errors import ConfigurationError, ShuffleError

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 10_000


class Shuffler:
    """Rejection-samples uniform permutations until one is solvable and unsolved."""

    @staticmethod
    def shuffle(
        size: int,
        rng: RandomSource | None = None,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> Configuration:
        """Return a random solvable board of the given size that is not the goal."""
        if max_attempts < 1:
            raise ConfigurationError(f"max_attempts must be >= 1, got {max_attempts}.")
        goal = build_goal_configuration(size)
        rng = rng or SystemRandomSource()

        for attempt in range(1, max_attempts + 1):
            candidate = goal.copy()
            Shuffler.fisher_yates(candidate.tiles, rng)

            if not is_solvable(candidate):
                logger.debug("Attempt %d rejected: unsolvable %s", attempt, candidate.tiles)
                continue
            if candidate == goal:
                logger.debug("Attempt %d rejected: shuffled back to the goal", attempt)
                continue

            logger.debug("Shuffled %d×%d board in %d attempt(s)", size, size, attempt)
            return candidate

        raise ShuffleError(
            f"No solvable {size}×{size} board found in {max_attempts} attempts."
        )

    @staticmethod
    def fisher_yates(numbers: list[int], rng: RandomSource) -> None:
        """Shuffle *numbers* in place.

        Positions are walked 1-based from the last down to the second, each
        swapped with a position drawn from ``rng.next_int(1, i)``.
        """
        for i in range(len(numbers), 1, -1):
            j = rng.next_int(1, i)
            numbers[i - 1], numbers[j - 1] = numbers[j - 1], numbers[i - 1]
