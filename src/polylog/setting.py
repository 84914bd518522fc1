"""
Resolved logging settings: an ordered list of adapter entries.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .base import BaseLoggerFactoryAdapter
from .exceptions import InvalidAdapterTypeError, InvalidArgumentError
from .registry import AdapterFactory, get_adapter_factory

AdapterRef = str | type


@dataclass(frozen=True)
class Entry:
    """One configured adapter: a registered identifier or an adapter class, plus its properties.

    The adapter reference is validated on construction, so a typo or a class
    that does not implement ``BaseLoggerFactoryAdapter`` fails here rather than
    on first logger acquisition.
    """

    adapter: AdapterRef
    properties: Mapping[str, str] = field(default_factory=dict, hash=False)
    factory: AdapterFactory = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.adapter is None:
            raise InvalidArgumentError("adapter")
        object.__setattr__(self, "factory", _resolve_factory(self.adapter))
        object.__setattr__(self, "properties", MappingProxyType({str(k): str(v) for k, v in (self.properties or {}).items()}))

    @property
    def adapter_name(self) -> str:
        if isinstance(self.adapter, str):
            return self.adapter
        return f"{self.adapter.__module__}.{self.adapter.__qualname__}"

    def create(self) -> Any:
        """Invoke the factory: with the properties mapping if non-empty, with no arguments otherwise."""
        if self.properties:
            return self.factory(dict(self.properties))
        return self.factory()


def _resolve_factory(adapter: AdapterRef) -> AdapterFactory:
    if isinstance(adapter, str):
        return get_adapter_factory(adapter)
    if not isinstance(adapter, type):
        raise InvalidAdapterTypeError(adapter=repr(adapter), reason="expected a class or a registered adapter name")
    name = f"{adapter.__module__}.{adapter.__qualname__}"
    if not issubclass(adapter, BaseLoggerFactoryAdapter):
        raise InvalidAdapterTypeError(adapter=name, reason=f"does not implement {BaseLoggerFactoryAdapter.__name__}")
    if inspect.isabstract(adapter):
        raise InvalidAdapterTypeError(adapter=name, reason="is abstract")
    return adapter


@dataclass(frozen=True)
class LogSetting:
    """Container for the adapter entries read from configuration."""

    entries: tuple[Entry, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))

    @classmethod
    def of(cls, *entries: Entry | AdapterRef) -> "LogSetting":
        """Build settings from entries, bare adapter names or classes."""
        return cls(tuple(e if isinstance(e, Entry) else Entry(e) for e in entries))

    @classmethod
    def from_items(cls, items: Iterable[tuple[AdapterRef, Mapping[str, str]]]) -> "LogSetting":
        return cls(tuple(Entry(adapter, properties) for adapter, properties in items))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


__all__ = ["Entry", "LogSetting", "AdapterRef"]
