"""
Polylog: a logging façade with pluggable, fan-out backends.

Application code logs through one stable API while the backend is selected at
runtime from configuration:
- noop: default when nothing is configured
- console: aligned console or JSON lines
- file: rotating JSON lines file
- stdlib: standard library ``logging``
- structlog: structlog

With several adapters active, every handle fans out to all of them.

Design Pattern: Strategy Pattern for backend abstraction, Composite for fan-out.

Usage:
    from polylog import get_logger

    log = get_logger(__name__)
    log.info("user logged in", user_id=42)
"""

from .base import AbstractCachingLoggerFactoryAdapter, AbstractLogger, BaseLogger, BaseLoggerFactoryAdapter
from .levels import LogLevel
from .manager import (
    LogManager,
    get_active_adapters,
    get_adapter,
    get_configuration_reader,
    get_current_caller_logger,
    get_logger,
    log_manager,
    register_adapter,
    reset,
    set_adapter,
)
from .multi import MultiLogger
from .setting import Entry, LogSetting

__all__ = [
    "LogLevel",
    "BaseLogger",
    "AbstractLogger",
    "BaseLoggerFactoryAdapter",
    "AbstractCachingLoggerFactoryAdapter",
    "MultiLogger",
    "Entry",
    "LogSetting",
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
