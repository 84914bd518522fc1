"""
Event building, JSON serialization and console rendering shared by the
console and file adapters.
"""

from __future__ import annotations

import traceback
from datetime import datetime, timezone
from typing import Any

import orjson

from .levels import LogLevel

EventDict = dict[str, Any]


def build_event(
    name: str,
    level: LogLevel,
    message: Any,
    exc: BaseException | None = None,
    fields: dict[str, Any] | None = None,
) -> EventDict:
    """Build the event dict rendered by the output adapters."""
    event: EventDict = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "level": level.name,
        "logger": name,
        "message": message if isinstance(message, str) else str(message),
    }
    if fields:
        for key, value in fields.items():
            event.setdefault(key, value)
    if exc is not None:
        event["exception"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip()
    return event


def orjson_dumps(v: Any) -> str:
    """Fast JSON serialization using orjson; unknown types fall back to ``str``."""
    return orjson.dumps(v, default=str, option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC).decode()


# =============================================================================
# Console Rendering
# =============================================================================

COLORS = {
    "reset": "\033[0m",
    "dim": "\033[2m",
    "timestamp": "\033[90m",
    "logger": "\033[35m",
    "key": "\033[34m",
}

_LEVEL_COLORS = {
    "TRACE": "\033[2;36m",
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARN": "\033[33m",
    "ERROR": "\033[31m",
    "FATAL": "\033[1;31m",
}


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


class ConsoleFormatter:
    """Renders events as fixed-width, right-aligned console lines.

    Format: ``timestamp | LEVEL | logger | message key=value ...`` followed by
    the exception traceback on its own lines.
    """

    EXCLUDED_KEYS = {"level", "message", "logger", "timestamp", "exception"}

    def __init__(
        self,
        *,
        timestamp_format: str = "%Y-%m-%d %H:%M:%S",
        level_width: int = 5,
        logger_width: int = 32,
        separator: str = " | ",
        show_datetime: bool = True,
    ):
        self.timestamp_format = timestamp_format
        self.timestamp_width = len(datetime.now().strftime(timestamp_format))
        self.level_width = level_width
        self.logger_width = logger_width
        self.separator = separator
        self.show_datetime = show_datetime

    @staticmethod
    def _fit_right(text: str, width: int) -> str:
        if width <= 0:
            return text
        if len(text) > width:
            if width <= 3:
                text = text[-width:]
            else:
                text = "..." + text[-(width - 3) :]
        return f"{text:>{width}}"

    def _format_timestamp(self, raw_timestamp: str | None) -> str:
        if raw_timestamp:
            try:
                normalized = raw_timestamp.replace("Z", "+00:00")
                dt = datetime.fromisoformat(normalized)
                if dt.tzinfo is None:
                    dt = dt.replace(tzinfo=timezone.utc)
                return dt.astimezone().strftime(self.timestamp_format)
            except (ValueError, TypeError):
                pass
        return datetime.now().strftime(self.timestamp_format)

    @staticmethod
    def _colorize_level(text: str, level_upper: str, use_color: bool) -> str:
        if not use_color:
            return text
        color = _LEVEL_COLORS.get(level_upper)
        if not color:
            return text
        return f"{color}{text}{COLORS['reset']}"

    @staticmethod
    def _maybe_color(text: str, color: str, use_color: bool) -> str:
        if not use_color:
            return text
        return colorize(text, color)

    def format(self, event_dict: EventDict, *, use_color: bool = False) -> str:
        """Format an event dict into an aligned string."""
        level_upper = str(event_dict.get("level", "INFO")).upper()
        message_text = str(event_dict.get("message", ""))

        extras = []
        for k, v in event_dict.items():
            if k not in self.EXCLUDED_KEYS:
                key_colored = self._maybe_color(k, "key", use_color)
                value_colored = self._maybe_color(str(v), "dim", use_color)
                extras.append(f"{key_colored}={value_colored}")
        if extras:
            message_text = f"{message_text} " + " ".join(extras)

        columns = []
        if self.show_datetime:
            timestamp = self._fit_right(self._format_timestamp(event_dict.get("timestamp")), self.timestamp_width)
            columns.append(self._maybe_color(timestamp, "timestamp", use_color))
        columns.append(self._colorize_level(self._fit_right(level_upper, self.level_width), level_upper, use_color))
        logger_name = self._fit_right(str(event_dict.get("logger", "root")), self.logger_width)
        columns.append(self._maybe_color(logger_name, "logger", use_color))
        columns.append(message_text)

        line = self.separator.join(columns)
        exception = event_dict.get("exception")
        if exception:
            line = f"{line}\n{exception}"
        return line


__all__ = ["EventDict", "build_event", "orjson_dumps", "colorize", "ConsoleFormatter"]
