from npuzzle.engine.gameplay.game import PuzzleSession
from npuzzle.engine.gameplay.guard import ResourceGuard

__all__ = ["PuzzleSession", "ResourceGuard"]
