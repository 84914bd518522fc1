"""
Configuration readers consumed by the log manager.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from ..setting import Entry, LogSetting
from .logging import LoggingSettings, _get_env_files

# Name of the configuration section polylog reads its adapters from.
LOGGING_SECTION = "polylog"


class BaseConfigurationReader(ABC):
    """Source of raw logging configuration.

    ``get_section`` may return ``None`` (nothing configured), a ready-to-use
    ``BaseLoggerFactoryAdapter`` or a ``LogSetting``.
    """

    @abstractmethod
    def get_section(self, name: str) -> Any:
        ...


class DefaultConfigurationReader(BaseConfigurationReader):
    """Reads ``LoggingSettings`` from the environment and ``.env`` files.

    Settings and the ``.env`` file list (which depends on ``POLYLOG_ENV``) are
    loaded on every call, so a ``reset()`` picks up environment changes.
    """

    def get_section(self, name: str) -> LogSetting | None:
        if name != LOGGING_SECTION:
            return None
        settings = LoggingSettings(_env_file=_get_env_files())
        names = settings.adapter_names
        if not names:
            return None
        return LogSetting(tuple(Entry(adapter, settings.properties_for(adapter)) for adapter in names))


class StaticConfigurationReader(BaseConfigurationReader):
    """Serves sections from an in-memory mapping."""

    def __init__(self, sections: Mapping[str, Any] | None = None):
        self._sections = dict(sections or {})

    def get_section(self, name: str) -> Any:
        return self._sections.get(name)

    @classmethod
    def for_logging(cls, section: Any) -> "StaticConfigurationReader":
        """Reader that serves ``section`` as the polylog logging section."""
        return cls({LOGGING_SECTION: section})


__all__ = [
    "LOGGING_SECTION",
    "BaseConfigurationReader",
    "DefaultConfigurationReader",
    "StaticConfigurationReader",
]
