"""Scoped release of resources a session holds."""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType

logger = logging.getLogger(__name__)


class ResourceGuard:
    """Collects release callbacks and runs each of them exactly once.

    Callbacks run in reverse order of registration when :meth:`close` is
    called. Closing again is a no-op; a callback handed to a closed guard runs
    immediately.
    """

    def __init__(self) -> None:
        self._releases: list[Callable[[], None]] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._releases)

    def give(self, release: Callable[[], None]) -> None:
        if self._closed:
            release()
            return
        self._releases.append(release)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True

        error: BaseException | None = None
        while self._releases:
            release = self._releases.pop()
            try:
                release()
            except Exception as exc:
                logger.exception("Release callback %r failed", release)
                if error is None:
                    error = exc
        if error is not None:
            raise error

    def __enter__(self) -> ResourceGuard:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
