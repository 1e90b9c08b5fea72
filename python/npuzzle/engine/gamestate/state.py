"""Tracks the mutable state of a puzzle session."""

from __future__ import annotations

from enum import StrEnum

from npuzzle.models.configuration import Configuration


class Phase(StrEnum):
    IDLE = "idle"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class SessionState:
    """Holds the current configuration, move counter, and phase."""

    def __init__(self, configuration: Configuration) -> None:
        self.configuration = configuration
        self.moves: int = 0
        self.phase: Phase = Phase.IDLE

    def increment_moves(self) -> None:
        self.moves += 1

    @property
    def is_terminal(self) -> bool:
        return self.phase is not Phase.IDLE

    def finish(self, phase: Phase) -> None:
        if phase is Phase.IDLE:
            raise ValueError("A session cannot be finished back into IDLE.")
        if not self.is_terminal:
            self.phase = phase
