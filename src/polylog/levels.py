"""
Log level enumeration shared by every adapter.
"""

from __future__ import annotations

from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels ordered from most permissive to fully suppressed.

    Values line up with the stdlib ``logging`` levels so that adapters bridging
    to ``logging`` can pass them through unchanged. ``ALL`` and ``OFF`` are
    thresholds only; nothing is ever written at those levels.
    """

    ALL = 0
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50
    OFF = 100

    @classmethod
    def parse(cls, value: "LogLevel | int | str") -> "LogLevel":
        """Parse a level from an enum member, an int or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            key = value.strip().upper()
            key = _ALIASES.get(key, key)
            try:
                return cls[key]
            except KeyError:
                pass
        raise ValueError(f"Invalid log level: {value!r}")

    @property
    def is_writable(self) -> bool:
        return self not in (LogLevel.ALL, LogLevel.OFF)


_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
    "VERBOSE": "TRACE",
    "NONE": "OFF",
}


__all__ = ["LogLevel"]
