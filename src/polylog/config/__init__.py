"""
Polylog Configuration Module.

Two layers:
- ``LoggingSettings``: environment-driven adapter selection (pydantic-settings, ``POLYLOG_`` prefix)
- configuration readers: what the log manager asks for its logging section

Usage:
    POLYLOG_ADAPTERS=console,structlog POLYLOG_LEVEL=debug python app.py

    # or programmatically
    from polylog import reset
    from polylog.config import StaticConfigurationReader
    from polylog.setting import LogSetting

    reset(StaticConfigurationReader.for_logging(LogSetting.of("console")))
"""

from .logging import LoggingSettings
from .reader import (
    LOGGING_SECTION,
    BaseConfigurationReader,
    DefaultConfigurationReader,
    StaticConfigurationReader,
)

__all__ = [
    "LoggingSettings",
    "LOGGING_SECTION",
    "BaseConfigurationReader",
    "DefaultConfigurationReader",
    "StaticConfigurationReader",
]
