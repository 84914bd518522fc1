"""
Adapter backed by structlog.

Handles forward to whatever structlog is configured with (processors, wrapper
class, logger factory), so the host application keeps full control over
rendering. The adapter only decides which levels reach structlog.
"""

from __future__ import annotations

from typing import Any

import structlog

from ..base import AbstractCachingLoggerFactoryAdapter, AbstractLogger, BaseLogger, Properties
from ..levels import LogLevel

# polylog level -> structlog method name
_METHODS = {
    LogLevel.TRACE: "debug",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "critical",
}


class StructlogLogger(AbstractLogger):
    def __init__(self, name: str, logger: Any, threshold: LogLevel):
        super().__init__(name)
        self._logger = logger
        self._threshold = threshold

    def is_enabled(self, level: LogLevel | str) -> bool:
        return LogLevel.parse(level) >= self._threshold

    def _write(self, level: LogLevel, message: Any, exc: BaseException | None, fields: dict[str, Any]) -> None:
        method = getattr(self._logger, _METHODS[level])
        # "event" is structlog's positional message argument
        kwargs = {key: value for key, value in fields.items() if key != "event"}
        if exc is not None:
            kwargs["exc_info"] = exc
        method(message, **kwargs)


class StructlogLoggerFactoryAdapter(AbstractCachingLoggerFactoryAdapter):
    """Hands out handles wrapping ``structlog.get_logger`` bound with ``logger=<name>``.

    Properties:
        level: threshold applied before calling structlog (default ``all``)
    """

    def __init__(self, properties: Properties | None = None):
        super().__init__(properties)
        self.level = self._level_property(LogLevel.ALL)

    def _create_logger(self, name: str) -> BaseLogger:
        return StructlogLogger(name, structlog.get_logger(logger=name), self.level)
