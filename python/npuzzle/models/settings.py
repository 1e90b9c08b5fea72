"""Session settings supplied by the host when a puzzle starts."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from npuzzle.models.configuration import check_size
from npuzzle.models.errors import ConfigurationError

DEFAULT_SIZE = 3


@dataclass
class SessionSettings:
    """Grid size, optional completion callback and host placements.

    ``placements`` maps every cell index to whatever the host uses to position
    a tile there (screen coordinates, a transform, a widget). The engine only
    stores and looks them up.
    """

    size: int = DEFAULT_SIZE
    on_completed: Callable[[], None] | None = None
    placements: Mapping[int, Any] | None = None

    def __post_init__(self) -> None:
        check_size(self.size)
        if self.on_completed is not None and not callable(self.on_completed):
            raise ConfigurationError("on_completed must be callable.")
        if self.placements is not None:
            expected = set(range(1, self.size * self.size + 1))
            if set(self.placements) != expected:
                raise ConfigurationError(
                    f"Placements must cover exactly cells 1..{self.size * self.size}, "
                    f"got {len(self.placements)} entries."
                )
