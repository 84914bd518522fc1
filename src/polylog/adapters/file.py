"""
File adapter: JSON lines with size-based rotation.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from ..base import AbstractCachingLoggerFactoryAdapter, AbstractLogger, BaseLogger, Properties
from ..formatters import build_event, orjson_dumps
from ..levels import LogLevel

DEFAULT_MAX_BYTES = 10 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 5


class FileLogger(AbstractLogger):
    def __init__(self, name: str, adapter: "FileLoggerFactoryAdapter"):
        super().__init__(name)
        self._adapter = adapter

    def is_enabled(self, level: LogLevel | str) -> bool:
        return LogLevel.parse(level) >= self._adapter.level

    def _write(self, level: LogLevel, message: Any, exc: BaseException | None, fields: dict[str, Any]) -> None:
        self._adapter.emit(build_event(self.name, level, message, exc, fields))


class FileLoggerFactoryAdapter(AbstractCachingLoggerFactoryAdapter):
    """Local file output with rotation (JSON format).

    Properties:
        path: target file (required)
        level: threshold (default ``all``)
        max_bytes: rotate once the file grows past this size (default 10 MiB)
        backup_count: number of rotated files kept (default 5)
    """

    def __init__(self, properties: Properties):
        super().__init__(properties)
        raw_path = self._properties.get("path", "").strip()
        if not raw_path:
            raise ValueError("File adapter requires a 'path' property")
        self.level = self._level_property(LogLevel.ALL)
        self.path = Path(raw_path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._max_bytes = int(self._properties.get("max_bytes", DEFAULT_MAX_BYTES))
        self._backup_count = int(self._properties.get("backup_count", DEFAULT_BACKUP_COUNT))
        self._write_lock = threading.Lock()
        self._file = open(self.path, "a", encoding="utf-8")

    def _create_logger(self, name: str) -> BaseLogger:
        return FileLogger(name, self)

    def emit(self, event_dict: dict[str, Any]) -> None:
        json_str = orjson_dumps(event_dict)
        with self._write_lock:
            if self._file.closed:
                raise ValueError(f"File adapter for '{self.path}' is closed")
            self._file.write(json_str + "\n")
            self._file.flush()
            self._maybe_rotate()

    def _backup_path(self, index: int) -> Path:
        return self.path.with_suffix(f".{index}.log")

    def _maybe_rotate(self) -> None:
        if self._max_bytes <= 0 or self.path.stat().st_size <= self._max_bytes:
            return
        self._file.close()
        if self._backup_count > 0:
            oldest = self._backup_path(self._backup_count)
            if oldest.exists():
                oldest.unlink()
            for i in range(self._backup_count - 1, 0, -1):
                src = self._backup_path(i)
                if src.exists():
                    src.rename(self._backup_path(i + 1))
            self.path.rename(self._backup_path(1))
        else:
            self.path.unlink()
        self._file = open(self.path, "a", encoding="utf-8")

    def close(self) -> None:
        with self._write_lock:
            self._file.close()
