"""
Fan-out logger handle used when more than one adapter is active.
"""

from __future__ import annotations

from typing import Any, Iterable

from .base import BaseLogger
from .exceptions import InvalidArgumentError
from .levels import LogLevel


class MultiLogger(BaseLogger):
    """Forwards every call to a fixed, ordered set of delegate handles.

    Writes reach every delegate in order; an exception raised by one delegate
    propagates to the caller. A level is enabled when any delegate has it
    enabled, so fanning out never records less than a single backend would.
    """

    def __init__(self, delegates: Iterable[BaseLogger]):
        self._delegates: tuple[BaseLogger, ...] = tuple(delegates)
        if not self._delegates:
            raise InvalidArgumentError("delegates", "must contain at least one logger")

    @property
    def delegates(self) -> tuple[BaseLogger, ...]:
        return self._delegates

    @property
    def name(self) -> str:
        return self._delegates[0].name

    def is_enabled(self, level: LogLevel | str) -> bool:
        level = LogLevel.parse(level)
        results = [delegate.is_enabled(level) for delegate in self._delegates]
        return any(results)

    def log(self, level: LogLevel | str, message: Any, exc: BaseException | None = None, **fields: Any) -> None:
        level = LogLevel.parse(level)
        if callable(message):
            # Evaluate once so every backend records the same text.
            if not self.is_enabled(level):
                return
            message = message()
        for delegate in self._delegates:
            delegate.log(level, message, exc, **fields)

    def __repr__(self) -> str:
        return f"MultiLogger({[type(d).__name__ for d in self._delegates]})"


__all__ = ["MultiLogger"]
