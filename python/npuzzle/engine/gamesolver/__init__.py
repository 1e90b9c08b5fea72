from npuzzle.engine.gamesolver.parity import (
    blank_row_from_bottom,
    count_inversions,
    is_solvable,
)

__all__ = ["blank_row_from_bottom", "count_inversions", "is_solvable"]
