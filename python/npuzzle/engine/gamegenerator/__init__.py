from npuzzle.engine.gamegenerator.generator import MAX_ATTEMPTS, Shuffler
from npuzzle.engine.gamegenerator.randomness import RandomSource, SystemRandomSource

__all__ = ["MAX_ATTEMPTS", "RandomSource", "Shuffler", "SystemRandomSource"]
