"""Random integer sources for the shuffler."""

from __future__ import annotations

import random
from typing import Protocol


class RandomSource(Protocol):
    def next_int(self, lo: int, hi: int) -> int:
        """Return a uniform integer in ``[lo, hi]`` (both inclusive)."""
        ...


class SystemRandomSource:
    """``random.Random`` behind the ``next_int`` interface.

    Pass a *seed* for reproducible shuffles.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def next_int(self, lo: int, hi: int) -> int:
        return self._rng.randint(lo, hi)
