"""
Logger handle and logger factory adapter abstractions.

Design Pattern: Strategy Pattern for backend abstraction, Template Method for
level gating. Application code only ever talks to ``BaseLogger``; every backend
plugs in through ``BaseLoggerFactoryAdapter``.
"""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from typing import Any, Mapping

from .exceptions import InvalidArgumentError
from .levels import LogLevel

LoggerKey = str | type
Properties = Mapping[str, str]

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}


def logger_name_for(key: LoggerKey) -> str:
    """Derive the category name for a logger key.

    Strings are used as-is; classes map to ``"{module}.{qualname}"``.
    """
    if isinstance(key, str):
        return key
    if isinstance(key, type):
        return f"{key.__module__}.{key.__qualname__}"
    raise InvalidArgumentError("key", f"must be a str or a type, got {type(key).__name__}")


def parse_bool(value: str | None, default: bool = False) -> bool:
    """Parse a boolean adapter property (True for "1", "true", "yes", "y", "on")."""
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


# =============================================================================
# Logger Handle
# =============================================================================


class BaseLogger(ABC):
    """Abstract logger handle handed out to application code."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Category name the handle was created for."""
        ...

    @abstractmethod
    def is_enabled(self, level: LogLevel | str) -> bool:
        """Return whether a message at ``level`` would be recorded."""
        ...

    @abstractmethod
    def log(self, level: LogLevel | str, message: Any, exc: BaseException | None = None, **fields: Any) -> None:
        """Write ``message`` at ``level`` with an optional exception and structured fields."""
        ...

    def trace(self, message: Any, exc: BaseException | None = None, **fields: Any) -> None:
        self.log(LogLevel.TRACE, message, exc, **fields)

    def debug(self, message: Any, exc: BaseException | None = None, **fields: Any) -> None:
        self.log(LogLevel.DEBUG, message, exc, **fields)

    def info(self, message: Any, exc: BaseException | None = None, **fields: Any) -> None:
        self.log(LogLevel.INFO, message, exc, **fields)

    def warn(self, message: Any, exc: BaseException | None = None, **fields: Any) -> None:
        self.log(LogLevel.WARN, message, exc, **fields)

    warning = warn

    def error(self, message: Any, exc: BaseException | None = None, **fields: Any) -> None:
        self.log(LogLevel.ERROR, message, exc, **fields)

    def fatal(self, message: Any, exc: BaseException | None = None, **fields: Any) -> None:
        self.log(LogLevel.FATAL, message, exc, **fields)

    critical = fatal

    def exception(self, message: Any, **fields: Any) -> None:
        """Log at ERROR with the exception currently being handled."""
        self.log(LogLevel.ERROR, message, sys.exc_info()[1], **fields)

    @property
    def is_trace_enabled(self) -> bool:
        return self.is_enabled(LogLevel.TRACE)

    @property
    def is_debug_enabled(self) -> bool:
        return self.is_enabled(LogLevel.DEBUG)

    @property
    def is_info_enabled(self) -> bool:
        return self.is_enabled(LogLevel.INFO)

    @property
    def is_warn_enabled(self) -> bool:
        return self.is_enabled(LogLevel.WARN)

    @property
    def is_error_enabled(self) -> bool:
        return self.is_enabled(LogLevel.ERROR)

    @property
    def is_fatal_enabled(self) -> bool:
        return self.is_enabled(LogLevel.FATAL)


class AbstractLogger(BaseLogger):
    """Logger handle that gates on ``is_enabled`` before delegating to ``_write``.

    A callable ``message`` is treated as a lazy message and only evaluated when
    the level is enabled.
    """

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def log(self, level: LogLevel | str, message: Any, exc: BaseException | None = None, **fields: Any) -> None:
        level = LogLevel.parse(level)
        if not level.is_writable:
            raise InvalidArgumentError("level", f"cannot write at threshold level {level.name}")
        if not self.is_enabled(level):
            return
        if callable(message):
            message = message()
        self._write(level, message, exc, fields)

    @abstractmethod
    def _write(self, level: LogLevel, message: Any, exc: BaseException | None, fields: dict[str, Any]) -> None:
        """Emit an already level-checked message to the backend."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"


# =============================================================================
# Logger Factory Adapter
# =============================================================================


class BaseLoggerFactoryAdapter(ABC):
    """Abstract backend capable of producing logger handles.

    Concrete adapters must be constructible with no arguments or with a single
    properties mapping (``str -> str``).
    """

    @abstractmethod
    def get_logger(self, key: LoggerKey) -> BaseLogger:
        """Return a handle for a category name or a type."""
        ...


class AbstractCachingLoggerFactoryAdapter(BaseLoggerFactoryAdapter):
    """Adapter base that caches one handle per category name."""

    def __init__(self, properties: Properties | None = None):
        self._properties: dict[str, str] = dict(properties or {})
        self._cache: dict[str, BaseLogger] = {}
        self._cache_lock = threading.Lock()

    @property
    def properties(self) -> Mapping[str, str]:
        return dict(self._properties)

    def get_logger(self, key: LoggerKey) -> BaseLogger:
        name = logger_name_for(key)
        logger = self._cache.get(name)
        if logger is not None:
            return logger
        with self._cache_lock:
            logger = self._cache.get(name)
            if logger is None:
                logger = self._create_logger(name)
                self._cache[name] = logger
        return logger

    @abstractmethod
    def _create_logger(self, name: str) -> BaseLogger:
        """Create a new handle for ``name``; called once per name."""
        ...

    def _level_property(self, default: LogLevel = LogLevel.ALL) -> LogLevel:
        raw = self._properties.get("level")
        if raw is None or not raw.strip():
            return default
        return LogLevel.parse(raw)


__all__ = [
    "LoggerKey",
    "Properties",
    "logger_name_for",
    "parse_bool",
    "BaseLogger",
    "AbstractLogger",
    "BaseLoggerFactoryAdapter",
    "AbstractCachingLoggerFactoryAdapter",
]
