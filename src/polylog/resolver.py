"""
Turns configuration into an ordered tuple of constructed adapters.
"""

from __future__ import annotations

from .adapters.noop import NoOpLoggerFactoryAdapter
from .base import BaseLoggerFactoryAdapter
from .config.reader import LOGGING_SECTION, BaseConfigurationReader, DefaultConfigurationReader
from .diagnostics import get_diagnostic_logger
from .exceptions import (
    AdapterConstructionError,
    ConfigurationAccessError,
    ConfigurationShapeError,
    InvalidArgumentError,
)
from .setting import LogSetting

logger = get_diagnostic_logger("resolver")


def _type_name(obj: object) -> str:
    cls = type(obj)
    return f"{cls.__module__}.{cls.__qualname__}"


def resolve_adapters(
    reader: BaseConfigurationReader,
    section: str = LOGGING_SECTION,
) -> tuple[BaseLoggerFactoryAdapter, ...]:
    """
    Resolve the active adapters from ``reader``.

    Args:
        reader: configuration reader to ask for ``section``
        section: configuration section name

    Returns:
        Non-empty tuple of adapters in declaration order. A missing section
        yields a single no-op adapter.

    Raises:
        ConfigurationAccessError: the reader raised
        ConfigurationShapeError: the section has an unsupported type
        AdapterConstructionError: an entry could not be turned into an adapter
    """
    if reader is None:
        raise InvalidArgumentError("reader")

    try:
        result = reader.get_section(section)
    except Exception as exc:
        raise ConfigurationAccessError(section=section, reader=_type_name(reader)) from exc

    if result is None:
        if type(reader) is DefaultConfigurationReader:
            logger.debug("no logging configuration found - suppressing logging output", section=section)
        else:
            logger.debug(
                "custom configuration reader returned None - suppressing logging output",
                reader=_type_name(reader),
            )
        return (NoOpLoggerFactoryAdapter(),)

    if isinstance(result, BaseLoggerFactoryAdapter):
        logger.debug(
            "using adapter returned from configuration reader",
            reader=_type_name(reader),
            adapter=_type_name(result),
        )
        return (result,)

    if not isinstance(result, LogSetting):
        raise ConfigurationShapeError(reader=_type_name(reader), result_type=_type_name(result))

    if not result.entries:
        logger.debug("logging configuration has no entries - suppressing logging output", reader=_type_name(reader))
        return (NoOpLoggerFactoryAdapter(),)

    return build_adapters(result)


def build_adapters(setting: LogSetting) -> tuple[BaseLoggerFactoryAdapter, ...]:
    """Construct one adapter per entry, preserving entry order."""
    adapters: list[BaseLoggerFactoryAdapter] = []
    for entry in setting.entries:
        try:
            adapter = entry.create()
        except Exception as exc:
            raise AdapterConstructionError(adapter=entry.adapter_name, reason=f"{type(exc).__name__}: {exc}") from exc

        if adapter is None:
            raise AdapterConstructionError(adapter=entry.adapter_name, reason="factory returned None")
        if not isinstance(adapter, BaseLoggerFactoryAdapter):
            raise AdapterConstructionError(
                adapter=entry.adapter_name,
                reason=f"factory returned {_type_name(adapter)}, not a logger factory adapter",
            )
        adapters.append(adapter)

    logger.debug("resolved logger factory adapters", adapters=[entry.adapter_name for entry in setting.entries])
    return tuple(adapters)


__all__ = ["resolve_adapters", "build_adapters"]
