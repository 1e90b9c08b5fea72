from npuzzle.engine.adjacency import adjacent_indexes
from npuzzle.engine.gamegenerator import Shuffler, SystemRandomSource
from npuzzle.engine.gameplay import PuzzleSession, ResourceGuard
from npuzzle.engine.gamesolver import count_inversions, is_solvable
from npuzzle.engine.gamestate import Phase, SessionState

__all__ = [
    "Phase",
    "PuzzleSession",
    "ResourceGuard",
    "SessionState",
    "Shuffler",
    "SystemRandomSource",
    "adjacent_indexes",
    "count_inversions",
    "is_solvable",
]
