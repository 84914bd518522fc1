"""
Adapter that silently discards everything.
"""

from __future__ import annotations

from typing import Any

from ..base import BaseLogger, BaseLoggerFactoryAdapter, LoggerKey, Properties
from ..levels import LogLevel


class NoOpLogger(BaseLogger):
    """Logger handle that records nothing; every level is disabled."""

    @property
    def name(self) -> str:
        return "noop"

    def is_enabled(self, level: LogLevel | str) -> bool:
        return False

    def log(self, level: LogLevel | str, message: Any, exc: BaseException | None = None, **fields: Any) -> None:
        pass


_NOOP_LOGGER = NoOpLogger()


class NoOpLoggerFactoryAdapter(BaseLoggerFactoryAdapter):
    """Fallback adapter used when no logging configuration exists."""

    def __init__(self, properties: Properties | None = None):
        pass

    def get_logger(self, key: LoggerKey) -> BaseLogger:
        return _NOOP_LOGGER
