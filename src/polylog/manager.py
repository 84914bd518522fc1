"""
LogManager: process-wide registry of active logger factory adapters.

Adapters are resolved lazily from the installed configuration reader on first
use and cached as an immutable tuple. Handles returned by ``get_logger`` are
bound to the adapters active at creation time; ``reset`` only affects handles
created afterwards.
"""

from __future__ import annotations

import inspect
import threading
from typing import Any

from .base import BaseLogger, BaseLoggerFactoryAdapter, LoggerKey, logger_name_for
from .config.reader import LOGGING_SECTION, BaseConfigurationReader, DefaultConfigurationReader
from .exceptions import AmbiguousAdapterError, InvalidArgumentError
from .multi import MultiLogger
from .resolver import resolve_adapters

_UNSET: Any = object()


class LogManager:
    """Registry of active adapters with lazy, double-checked resolution.

    Pass a ``LogManager`` by reference to components that need to acquire
    loggers; the module-level ``log_manager`` is the process default.
    """

    def __init__(self, reader: BaseConfigurationReader | None = None, section: str = LOGGING_SECTION):
        self._section = section
        self._lock = threading.Lock()
        self._reader: BaseConfigurationReader = reader if reader is not None else DefaultConfigurationReader()
        self._adapters: tuple[BaseLoggerFactoryAdapter, ...] = ()

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def configuration_reader(self) -> BaseConfigurationReader:
        """The installed configuration reader (swapped atomically by ``reset``)."""
        return self._reader

    @property
    def section(self) -> str:
        return self._section

    def reset(self, reader: BaseConfigurationReader = _UNSET) -> None:
        """
        Re-arm the manager: install ``reader`` (or a fresh default reader) and
        drop the cached adapters so the next access resolves again.

        Handles already handed out are not affected.

        Raises:
            InvalidArgumentError: ``reader`` was passed explicitly as None
        """
        if reader is None:
            raise InvalidArgumentError("reader")
        new_reader = DefaultConfigurationReader() if reader is _UNSET else reader
        with self._lock:
            self._reader = new_reader
            self._adapters = ()

    # =========================================================================
    # Adapters
    # =========================================================================

    @property
    def adapters(self) -> tuple[BaseLoggerFactoryAdapter, ...]:
        """Active adapters in registration order, resolving them on first access."""
        adapters = self._adapters
        if not adapters:
            with self._lock:
                if not self._adapters:
                    self._adapters = resolve_adapters(self._reader, self._section)
                adapters = self._adapters
        return adapters

    def get_active_adapters(self) -> tuple[BaseLoggerFactoryAdapter, ...]:
        return self.adapters

    @property
    def is_resolved(self) -> bool:
        return bool(self._adapters)

    def get_adapter(self) -> BaseLoggerFactoryAdapter:
        """
        Return the single active adapter.

        Raises:
            AmbiguousAdapterError: the active adapter count is not exactly one
        """
        adapters = self.adapters
        if len(adapters) != 1:
            raise AmbiguousAdapterError(count=len(adapters))
        return adapters[0]

    def set_adapter(self, adapter: BaseLoggerFactoryAdapter) -> None:
        """
        Replace the active adapters with ``adapter``.

        Raises:
            InvalidArgumentError: ``adapter`` is None
            AmbiguousAdapterError: more than one adapter is already active
        """
        if adapter is None:
            raise InvalidArgumentError("adapter")
        with self._lock:
            if len(self._adapters) > 1:
                raise AmbiguousAdapterError(count=len(self._adapters))
            self._adapters = (adapter,)

    adapter = property(get_adapter, set_adapter)

    def register_adapter(self, adapter: BaseLoggerFactoryAdapter) -> None:
        """
        Append ``adapter`` to the active adapters without triggering resolution.

        Raises:
            InvalidArgumentError: ``adapter`` is None
        """
        if adapter is None:
            raise InvalidArgumentError("adapter")
        with self._lock:
            self._adapters = self._adapters + (adapter,)

    # =========================================================================
    # Logger acquisition
    # =========================================================================

    def get_logger(self, key: LoggerKey) -> BaseLogger:
        """
        Get a logger for a category name or a type.

        With one active adapter its handle is returned directly; with several,
        a ``MultiLogger`` wraps one handle per adapter in registration order.
        """
        if key is None:
            raise InvalidArgumentError("key")
        logger_name_for(key)  # validates the key type
        adapters = self.adapters
        if len(adapters) == 1:
            return adapters[0].get_logger(key)
        return MultiLogger(adapter.get_logger(key) for adapter in adapters)

    def get_current_caller_logger(self) -> BaseLogger:
        """
        Get a logger keyed by the immediate caller.

        Inspects the caller's frame: a ``self`` local yields its class, a
        ``cls`` local yields that class, anything else falls back to the
        caller's module name. Frame inspection is slow; prefer ``get_logger``
        with an explicit type or name on hot paths.
        """
        frame = inspect.currentframe()
        try:
            caller = frame.f_back if frame is not None else None
            return self.get_logger(_caller_key(caller))
        finally:
            del frame

    def __repr__(self) -> str:
        return f"LogManager(reader={type(self._reader).__name__}, adapters={len(self._adapters)})"


def _caller_key(frame: Any) -> LoggerKey:
    if frame is None:
        return "root"
    f_locals = frame.f_locals
    owner = f_locals.get("self")
    if owner is not None and frame.f_code.co_varnames[:1] == ("self",):
        return type(owner)
    owner = f_locals.get("cls")
    if isinstance(owner, type) and frame.f_code.co_varnames[:1] == ("cls",):
        return owner
    return frame.f_globals.get("__name__") or "root"


# =============================================================================
# Process default
# =============================================================================

log_manager = LogManager()


def get_logger(key: LoggerKey) -> BaseLogger:
    """Get a logger from the process-wide manager."""
    return log_manager.get_logger(key)


def get_current_caller_logger() -> BaseLogger:
    """Get a logger for the calling class or module (slow, see ``LogManager.get_current_caller_logger``)."""
    frame = inspect.currentframe()
    try:
        caller = frame.f_back if frame is not None else None
        return log_manager.get_logger(_caller_key(caller))
    finally:
        del frame


def get_active_adapters() -> tuple[BaseLoggerFactoryAdapter, ...]:
    return log_manager.adapters


def get_adapter() -> BaseLoggerFactoryAdapter:
    return log_manager.get_adapter()


def set_adapter(adapter: BaseLoggerFactoryAdapter) -> None:
    log_manager.set_adapter(adapter)


def register_adapter(adapter: BaseLoggerFactoryAdapter) -> None:
    log_manager.register_adapter(adapter)


def reset(reader: BaseConfigurationReader = _UNSET) -> None:
    log_manager.reset(reader)


def get_configuration_reader() -> BaseConfigurationReader:
    return log_manager.configuration_reader


__all__ = [
    "LogManager",
    "log_manager",
    "get_logger",
    "get_current_caller_logger",
    "get_active_adapters",
    "get_adapter",
    "set_adapter",
    "register_adapter",
    "reset",
    "get_configuration_reader",
]
