from __future__ import annotations

import typing as t

import pytest

from polylog import manager as manager_module
from polylog import registry
from polylog.base import AbstractCachingLoggerFactoryAdapter, AbstractLogger, BaseLogger
from polylog.levels import LogLevel
from polylog.manager import LogManager


class RecordingLogger(AbstractLogger):
    """Logger handle that keeps every write in memory."""

    def __init__(self, name: str, threshold: LogLevel = LogLevel.ALL):
        super().__init__(name)
        self.threshold = threshold
        self.records: list[tuple[LogLevel, t.Any, BaseException | None, dict]] = []
        self.enabled_queries: list[LogLevel] = []

    def is_enabled(self, level: LogLevel) -> bool:
        self.enabled_queries.append(level)
        return level >= self.threshold

    def _write(self, level, message, exc, fields) -> None:
        self.records.append((level, message, exc, dict(fields)))


class RecordingAdapter(AbstractCachingLoggerFactoryAdapter):
    """Adapter remembering how it was constructed."""

    def __init__(self, properties: t.Mapping[str, str] | None = None):
        super().__init__(properties)
        self.constructed_with = properties
        self.level = self._level_property(LogLevel.ALL)

    def _create_logger(self, name: str) -> BaseLogger:
        return RecordingLogger(name, self.level)


class OtherRecordingAdapter(RecordingAdapter):
    pass


@pytest.fixture
def recording_adapter_cls() -> type[RecordingAdapter]:
    return RecordingAdapter


@pytest.fixture
def other_recording_adapter_cls() -> type[RecordingAdapter]:
    return OtherRecordingAdapter


@pytest.fixture
def recording_logger_cls() -> type[RecordingLogger]:
    return RecordingLogger


@pytest.fixture
def manager() -> LogManager:
    """Fresh manager, unresolved, reading from the default configuration reader."""
    return LogManager()


@pytest.fixture(autouse=True)
def isolate_global_state(monkeypatch):
    """Keep the process-wide manager, adapter registry and environment clean between tests."""
    for key in ("POLYLOG_ADAPTERS", "POLYLOG_LEVEL", "POLYLOG_PROPERTIES", "POLYLOG_ENV"):
        monkeypatch.delenv(key, raising=False)
    manager_module.log_manager.reset()
    yield
    manager_module.log_manager.reset()
    registry.reset_adapter_factories()
