"""Notifications the engine emits and the selection interface it consumes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

logger = logging.getLogger(__name__)


# -- outbound -----------------------------------------------------------------


@dataclass(frozen=True)
class TileMoved:
    """A tile slid from ``from_index`` into the empty cell at ``to_index``."""

    tile: int
    from_index: int
    to_index: int


@dataclass(frozen=True)
class PuzzleSolved:
    moves: int


Event = TileMoved | PuzzleSolved
Listener = Callable[[Event], None]


class RejectReason(StrEnum):
    NOT_ADJACENT_TO_EMPTY = "not_adjacent_to_empty"
    SESSION_CLOSED = "session_closed"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single ``attempt_move`` call."""

    accepted: bool
    moved: TileMoved | None = None
    solved: bool = False
    reason: RejectReason | None = None

    @classmethod
    def rejected(cls, reason: RejectReason) -> MoveResult:
        return cls(accepted=False, reason=reason)

    @classmethod
    def applied(cls, moved: TileMoved, solved: bool) -> MoveResult:
        return cls(accepted=True, moved=moved, solved=solved)


# -- inbound ------------------------------------------------------------------


class Subscription(Protocol):
    def close(self) -> None: ...


class SelectionSource(Protocol):
    """Anything that delivers selected cell indexes to a handler."""

    def subscribe(self, handler: Callable[[int], None]) -> Subscription: ...


class _FeedSubscription:
    def __init__(self, feed: SelectionFeed, handler: Callable[[int], None]) -> None:
        self._feed = feed
        self._handler = handler
        self.closed = False

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._feed._unsubscribe(self._handler)


class SelectionFeed:
    """In-process selection source.

    Hosts translate raw input (clicks, key presses, typed numbers) into cell
    indexes and push them through :meth:`select`.
    """

    def __init__(self) -> None:
        self._handlers: list[Callable[[int], None]] = []

    def subscribe(self, handler: Callable[[int], None]) -> _FeedSubscription:
        self._handlers.append(handler)
        return _FeedSubscription(self, handler)

    def _unsubscribe(self, handler: Callable[[int], None]) -> None:
        self._handlers.remove(handler)

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def select(self, index: int) -> None:
        if not self._handlers:
            logger.debug("Selection %r dropped: no subscribers", index)
        for handler in list(self._handlers):
            handler(index)
