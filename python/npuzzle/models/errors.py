"""Exceptions raised by the puzzle engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error the engine raises."""


class ConfigurationError(PuzzleError, ValueError):
    """Malformed board or session settings."""


class InvalidIndex(PuzzleError, IndexError):
    """A cell index outside ``1..size²``."""

    def __init__(self, index: object, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(
            f"Cell index {index!r} is outside 1..{size * size} "
            f"for a {size}×{size} board."
        )


class ShuffleError(PuzzleError, RuntimeError):
    """The shuffler ran out of attempts without finding a usable board."""
