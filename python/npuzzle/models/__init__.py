from npuzzle.models.configuration import (
    EMPTY,
    Configuration,
    build_goal_configuration,
    equals,
)
from npuzzle.models.errors import (
    ConfigurationError,
    InvalidIndex,
    PuzzleError,
    ShuffleError,
)
from npuzzle.models.events import (
    MoveResult,
    PuzzleSolved,
    RejectReason,
    SelectionFeed,
    TileMoved,
)
from npuzzle.models.settings import SessionSettings

__all__ = [
    "EMPTY",
    "Configuration",
    "ConfigurationError",
    "InvalidIndex",
    "MoveResult",
    "PuzzleError",
    "PuzzleSolved",
    "RejectReason",
    "SelectionFeed",
    "SessionSettings",
    "ShuffleError",
    "TileMoved",
    "build_goal_configuration",
    "equals",
]
