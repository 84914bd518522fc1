"""
Console adapter: aligned human-readable lines or JSON lines on stdout/stderr.
"""

from __future__ import annotations

import sys
import threading
from typing import Any, Literal, TextIO

from ..base import AbstractCachingLoggerFactoryAdapter, AbstractLogger, BaseLogger, Properties, parse_bool
from ..formatters import ConsoleFormatter, build_event, orjson_dumps
from ..levels import LogLevel

LogFormat = Literal["console", "json"]


class ConsoleLogger(AbstractLogger):
    """Logger handle writing to the adapter's stream."""

    def __init__(self, name: str, adapter: "ConsoleLoggerFactoryAdapter"):
        super().__init__(name)
        self._adapter = adapter

    def is_enabled(self, level: LogLevel | str) -> bool:
        return LogLevel.parse(level) >= self._adapter.level

    def _write(self, level: LogLevel, message: Any, exc: BaseException | None, fields: dict[str, Any]) -> None:
        self._adapter.emit(build_event(self.name, level, message, exc, fields))


class ConsoleLoggerFactoryAdapter(AbstractCachingLoggerFactoryAdapter):
    """Console output with configurable format.

    Properties:
        level: threshold (default ``all``)
        format: ``console`` (aligned columns) or ``json``
        stream: ``stderr`` (default) or ``stdout``
        show_datetime: include the timestamp column (default ``true``)
        color: ``auto`` (default, color when the stream is a TTY), ``true`` or ``false``
    """

    def __init__(self, properties: Properties | None = None, *, stream: TextIO | None = None):
        super().__init__(properties)
        self.level = self._level_property(LogLevel.ALL)
        fmt = self._properties.get("format", "console").strip().lower()
        if fmt not in ("console", "json"):
            raise ValueError(f"Unsupported console format: {fmt}")
        self.format: LogFormat = fmt  # type: ignore[assignment]
        self._stream_name = self._properties.get("stream", "stderr").strip().lower()
        if self._stream_name not in ("stdout", "stderr"):
            raise ValueError(f"Unsupported console stream: {self._stream_name}")
        self._stream = stream
        self._color = self._properties.get("color", "auto").strip().lower()
        self._formatter = ConsoleFormatter(show_datetime=parse_bool(self._properties.get("show_datetime"), True))
        self._write_lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        # Looked up per write so redirected sys.stdout/sys.stderr are honored.
        if self._stream is not None:
            return self._stream
        return sys.stdout if self._stream_name == "stdout" else sys.stderr

    def _use_color(self, stream: TextIO) -> bool:
        if self._color == "auto":
            return bool(getattr(stream, "isatty", lambda: False)())
        return parse_bool(self._color)

    def _create_logger(self, name: str) -> BaseLogger:
        return ConsoleLogger(name, self)

    def emit(self, event_dict: dict[str, Any]) -> None:
        stream = self.stream
        if self.format == "json":
            output = orjson_dumps(event_dict)
        else:
            output = self._formatter.format(event_dict, use_color=self._use_color(stream))
        with self._write_lock:
            stream.write(output + "\n")
            stream.flush()
