"""Configuration model for the sliding puzzle.

Cells are numbered ``1..size²`` in row-major order; ``0`` marks the empty cell.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from npuzzle.models.errors import ConfigurationError, InvalidIndex

EMPTY = 0


def check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int) or size < 2:
        raise ConfigurationError(f"Grid size must be an integer >= 2, got {size!r}.")


@dataclass
class Configuration:
    """Assignment of tiles to cells at one instant.

    ``tiles`` is stored flat and 0-based; every public accessor takes the
    1-based cell index used throughout the engine.
    """

    size: int
    tiles: list[int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Configuration:
        """Create a configuration from a flat row-major tile list.

        Example::

            Configuration.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        check_size(size)
        cells = size * size
        if len(flat) != cells:
            raise ConfigurationError(
                f"Expected {cells} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        seen: set[int] = set()
        for tile in flat:
            if isinstance(tile, bool) or not isinstance(tile, int):
                raise ConfigurationError(f"Tile {tile!r} is not an integer.")
            if not 0 <= tile < cells:
                raise ConfigurationError(
                    f"Tile {tile} is outside 0..{cells - 1}."
                )
            if tile in seen:
                raise ConfigurationError(f"Tile {tile} appears more than once.")
            seen.add(tile)
        return cls(size=size, tiles=list(flat))

    # -- queries --------------------------------------------------------------

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidIndex(index, self.size)
        if not 1 <= index <= self.cell_count:
            raise InvalidIndex(index, self.size)

    def tile_at(self, index: int) -> int:
        self.check_index(index)
        return self.tiles[index - 1]

    def index_of(self, tile: int) -> int:
        """Return the cell currently holding *tile*."""
        try:
            return self.tiles.index(tile) + 1
        except ValueError:
            raise ConfigurationError(f"Tile {tile!r} is not on the board.") from None

    @property
    def empty_index(self) -> int:
        return self.index_of(EMPTY)

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* sits in its goal cell."""
        tile = self.tile_at(index)
        if tile == EMPTY:
            return index == self.cell_count
        return tile == index

    def as_mapping(self) -> dict[int, int]:
        return {index: tile for index, tile in enumerate(self.tiles, start=1)}

    def rows(self) -> Iterator[list[int]]:
        for r in range(self.size):
            yield self.tiles[r * self.size : (r + 1) * self.size]

    # -- mutation -------------------------------------------------------------

    def swap(self, a: int, b: int) -> None:
        """Exchange the tiles at cells *a* and *b* in place."""
        self.check_index(a)
        self.check_index(b)
        self.tiles[a - 1], self.tiles[b - 1] = self.tiles[b - 1], self.tiles[a - 1]

    def copy(self) -> Configuration:
        return Configuration(size=self.size, tiles=self.tiles[:])


def build_goal_configuration(size: int) -> Configuration:
    """Return the solved board: tiles in order, empty cell bottom-right."""
    check_size(size)
    return Configuration(size=size, tiles=[*range(1, size * size), EMPTY])


def equals(a: Configuration, b: Configuration) -> bool:
    return a.size == b.size and a.tiles == b.tiles
