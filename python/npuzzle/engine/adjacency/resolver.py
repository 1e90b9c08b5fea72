"""Orthogonal neighbours of a cell on a row-major grid."""

from __future__ import annotations

from npuzzle.models.errors import InvalidIndex


def adjacent_indexes(index: int, size: int) -> frozenset[int]:
    """Return the cells sharing an edge with *index* (1-based).

    Corners have 2 neighbours, edge cells 3, interior cells 4.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidIndex(index, size)
    if not 1 <= index <= size * size:
        raise InvalidIndex(index, size)

    neighbours: set[int] = set()

    # Horizontal
    if index % size == 0:
        neighbours.add(index - 1)
    elif index % size == 1:
        neighbours.add(index + 1)
    else:
        neighbours.update((index - 1, index + 1))

    # Vertical
    if index <= size:
        neighbours.add(index + size)
    elif index > size * (size - 1):
        neighbours.add(index - size)
    else:
        neighbours.update((index - size, index + size))

    return frozenset(neighbours)
