"""
Bridge capturing standard library ``logging`` records into polylog.
"""

from __future__ import annotations

import logging
import threading

from .adapters.stdlib import POLYLOG_RECORD_FLAG
from .levels import LogLevel
from .manager import LogManager, log_manager


def level_from_stdlib(levelno: int) -> LogLevel:
    """Map a stdlib level number to the closest writable ``LogLevel`` at or below it."""
    for level in (LogLevel.FATAL, LogLevel.ERROR, LogLevel.WARN, LogLevel.INFO, LogLevel.DEBUG):
        if levelno >= level:
            return level
    return LogLevel.TRACE


class PolylogHandler(logging.Handler):
    """
    Redirect standard library logging records into a ``LogManager``.

    Records produced by polylog's own ``stdlib`` adapter or its ``polylog.*``
    diagnostic loggers, and any record emitted while a bridged record is being
    dispatched on the same thread, are dropped so the bridge cannot feed itself.
    """

    def __init__(self, level: int = logging.NOTSET, manager: LogManager | None = None):
        super().__init__(level)
        self._manager = manager
        self._local = threading.local()

    @property
    def manager(self) -> LogManager:
        return self._manager if self._manager is not None else log_manager

    def emit(self, record: logging.LogRecord) -> None:
        if getattr(record, POLYLOG_RECORD_FLAG, False) or getattr(self._local, "active", False):
            return
        if record.name == "polylog" or record.name.startswith("polylog."):
            return
        self._local.active = True
        try:
            msg = record.getMessage()
            exc = record.exc_info[1] if record.exc_info else None
            logger = self.manager.get_logger(record.name or "root")
            logger.log(level_from_stdlib(record.levelno), msg, exc)
        except Exception:
            self.handleError(record)
        finally:
            self._local.active = False


def install_bridge(level: int = logging.NOTSET, manager: LogManager | None = None) -> PolylogHandler:
    """Attach a ``PolylogHandler`` to the root logger and return it."""
    handler = PolylogHandler(level, manager)
    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    return handler


def uninstall_bridge(handler: PolylogHandler) -> None:
    logging.getLogger().removeHandler(handler)


__all__ = ["PolylogHandler", "install_bridge", "uninstall_bridge", "level_from_stdlib"]
