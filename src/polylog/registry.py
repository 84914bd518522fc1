"""
AdapterRegistry: maps configuration-level adapter identifiers to factories.

Uses Strategy + Factory so configuration can name a backend ("console",
"structlog", ...) instead of a class:
- noop: discards everything
- console: human-readable or JSON lines on stdout/stderr
- file: rotating JSON lines file
- stdlib: bridges to the standard library ``logging`` module
- structlog: bridges to structlog

A factory receives either nothing or a single properties mapping, exactly like
an adapter class constructor.
"""

from __future__ import annotations

import threading
from typing import Callable

from .base import BaseLoggerFactoryAdapter, Properties
from .exceptions import InvalidArgumentError, UnknownAdapterError

# Factory signature: () -> adapter  or  (properties) -> adapter
AdapterFactory = Callable[..., BaseLoggerFactoryAdapter]


def create_noop_adapter(properties: Properties | None = None) -> BaseLoggerFactoryAdapter:
    from .adapters.noop import NoOpLoggerFactoryAdapter

    return NoOpLoggerFactoryAdapter(properties)


def create_console_adapter(properties: Properties | None = None) -> BaseLoggerFactoryAdapter:
    from .adapters.console import ConsoleLoggerFactoryAdapter

    return ConsoleLoggerFactoryAdapter(properties)


def create_file_adapter(properties: Properties | None = None) -> BaseLoggerFactoryAdapter:
    from .adapters.file import FileLoggerFactoryAdapter

    if not properties:
        raise ValueError("File adapter requires a 'path' property")
    return FileLoggerFactoryAdapter(properties)


def create_stdlib_adapter(properties: Properties | None = None) -> BaseLoggerFactoryAdapter:
    from .adapters.stdlib import StdlibLoggerFactoryAdapter

    return StdlibLoggerFactoryAdapter(properties)


def create_structlog_adapter(properties: Properties | None = None) -> BaseLoggerFactoryAdapter:
    from .adapters.structlog import StructlogLoggerFactoryAdapter

    return StructlogLoggerFactoryAdapter(properties)


# Built-in factories (Strategy Pattern)
_BUILTIN_FACTORIES: dict[str, AdapterFactory] = {
    "noop": create_noop_adapter,
    "console": create_console_adapter,
    "file": create_file_adapter,
    "stdlib": create_stdlib_adapter,
    "structlog": create_structlog_adapter,
}

_factories: dict[str, AdapterFactory] = dict(_BUILTIN_FACTORIES)
_factories_lock = threading.Lock()


def _normalize(name: str) -> str:
    return name.strip().lower()


def register_adapter_factory(name: str, factory: AdapterFactory) -> None:
    """Register (or replace) the factory for an adapter identifier."""
    if not name or not name.strip():
        raise InvalidArgumentError("name", "must be a non-empty string")
    if factory is None:
        raise InvalidArgumentError("factory")
    with _factories_lock:
        _factories[_normalize(name)] = factory


def unregister_adapter_factory(name: str) -> None:
    """Remove a registered identifier; unknown names are ignored."""
    with _factories_lock:
        _factories.pop(_normalize(name), None)


def get_adapter_factory(name: str) -> AdapterFactory:
    """Look up the factory for ``name``.

    Raises:
        UnknownAdapterError: no factory is registered under ``name``
    """
    factory = _factories.get(_normalize(name))
    if factory is None:
        raise UnknownAdapterError(name=name, available=available_adapters())
    return factory


def is_registered(name: str) -> bool:
    return _normalize(name) in _factories


def available_adapters() -> list[str]:
    return sorted(_factories)


def reset_adapter_factories() -> None:
    """Restore the built-in factories only (used for testing)."""
    with _factories_lock:
        _factories.clear()
        _factories.update(_BUILTIN_FACTORIES)


__all__ = [
    "AdapterFactory",
    "register_adapter_factory",
    "unregister_adapter_factory",
    "get_adapter_factory",
    "is_registered",
    "available_adapters",
    "reset_adapter_factories",
    "create_noop_adapter",
    "create_console_adapter",
    "create_file_adapter",
    "create_stdlib_adapter",
    "create_structlog_adapter",
]
