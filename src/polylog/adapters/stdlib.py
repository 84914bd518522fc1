"""
Adapter bridging to the standard library ``logging`` module.
"""

from __future__ import annotations

import logging
from typing import Any

from ..base import AbstractCachingLoggerFactoryAdapter, AbstractLogger, BaseLogger, Properties
from ..levels import LogLevel

logging.addLevelName(LogLevel.TRACE.value, "TRACE")

# Marks records written by this adapter so the stdlib bridge can skip them.
POLYLOG_RECORD_FLAG = "polylog_origin"


class StdlibLogger(AbstractLogger):
    """Logger handle wrapping a ``logging.Logger``; level checks are delegated to it."""

    def __init__(self, name: str, logger: logging.Logger):
        super().__init__(name)
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def is_enabled(self, level: LogLevel | str) -> bool:
        level = LogLevel.parse(level)
        if level == LogLevel.OFF:
            return False
        return self._logger.isEnabledFor(int(level))

    def _write(self, level: LogLevel, message: Any, exc: BaseException | None, fields: dict[str, Any]) -> None:
        exc_info = (type(exc), exc, exc.__traceback__) if exc is not None else None
        extra = {POLYLOG_RECORD_FLAG: True}
        if fields:
            extra["fields"] = fields
        self._logger.log(int(level), message, exc_info=exc_info, extra=extra)


class StdlibLoggerFactoryAdapter(AbstractCachingLoggerFactoryAdapter):
    """Hands out handles backed by ``logging.getLogger``.

    Properties:
        prefix: optional prefix prepended to every category (``"<prefix>.<name>"``)
        level: when set, applied with ``setLevel`` to each created stdlib logger
    """

    def __init__(self, properties: Properties | None = None):
        super().__init__(properties)
        self.prefix = self._properties.get("prefix", "").strip().strip(".")
        raw_level = self._properties.get("level", "").strip()
        self.level: LogLevel | None = LogLevel.parse(raw_level) if raw_level else None

    def _create_logger(self, name: str) -> BaseLogger:
        stdlib_name = f"{self.prefix}.{name}" if self.prefix else name
        logger = logging.getLogger(stdlib_name)
        if self.level is not None:
            logger.setLevel(int(self.level) or 1)  # ALL must not mean NOTSET
        return StdlibLogger(name, logger)
