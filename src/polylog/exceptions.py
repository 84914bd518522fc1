"""
Polylog exception hierarchy.

Errors are split along two axes:
- configuration errors, raised while turning configuration into adapters;
- call-site errors, raised synchronously by the registry API before any state changes.

Nothing in this package logs and swallows its own failures: the logging layer
cannot rely on logging to report that it is broken.
"""

from __future__ import annotations

from typing import Any, Dict


class PolylogError(Exception):
    """Base exception for all polylog errors.

    Carries a stable machine-readable ``code`` and a ``details`` mapping next to
    the human-readable message.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


# ================================
# Configuration errors
# ================================


class ConfigurationError(PolylogError):
    """Base class for errors raised while resolving adapters from configuration."""

    pass


class ConfigurationAccessError(ConfigurationError):
    """The configuration reader raised while being asked for a section."""

    def __init__(self, *, section: str, reader: str) -> None:
        super().__init__(
            f"Failed obtaining logging configuration from section '{section}' using reader '{reader}'",
            code="CONFIG_ACCESS_FAILED",
            details={"section": section, "reader": reader},
        )


class ConfigurationShapeError(ConfigurationError):
    """The section result is neither None, a ready adapter nor a LogSetting."""

    def __init__(self, *, reader: str, result_type: str) -> None:
        super().__init__(
            f"ConfigurationReader '{reader}' returned unknown settings instance of type '{result_type}'",
            code="CONFIG_SHAPE_INVALID",
            details={"reader": reader, "result_type": result_type},
        )


class AdapterConstructionError(ConfigurationError):
    """An adapter could not be constructed from a settings entry."""

    def __init__(self, *, adapter: str, reason: str) -> None:
        super().__init__(
            f"Unable to create adapter '{adapter}': {reason}. "
            "Adapters must accept either no arguments or a single properties mapping",
            code="ADAPTER_CONSTRUCTION_FAILED",
            details={"adapter": adapter, "reason": reason},
        )


class InvalidAdapterTypeError(ConfigurationError, TypeError):
    """A settings entry names a type that is not a concrete logger factory adapter."""

    def __init__(self, *, adapter: str, reason: str) -> None:
        super().__init__(
            f"Type '{adapter}' cannot be used as a logger factory adapter: {reason}",
            code="ADAPTER_TYPE_INVALID",
            details={"adapter": adapter, "reason": reason},
        )


class UnknownAdapterError(ConfigurationError, LookupError):
    """A settings entry names an adapter identifier that is not registered."""

    def __init__(self, *, name: str, available: list[str]) -> None:
        super().__init__(
            f"Unknown logger factory adapter '{name}'. Available: {', '.join(available) or '<none>'}",
            code="ADAPTER_UNKNOWN",
            details={"name": name, "available": available},
        )


# ================================
# Call-site errors
# ================================


class InvalidArgumentError(PolylogError, ValueError):
    """An argument passed to the registry API is invalid (typically None)."""

    def __init__(self, argument: str, reason: str = "must not be None") -> None:
        super().__init__(
            f"Argument '{argument}' {reason}",
            code="INVALID_ARGUMENT",
            details={"argument": argument, "reason": reason},
        )


class AmbiguousAdapterError(PolylogError, RuntimeError):
    """The single-adapter accessor was used while the adapter count is not exactly one."""

    def __init__(self, *, count: int) -> None:
        super().__init__(
            f"{count} logger factory adapters are registered. Please use the 'adapters' property",
            code="MULTIPLE_ADAPTERS",
            details={"count": count},
        )


__all__ = [
    "PolylogError",
    "ConfigurationError",
    "ConfigurationAccessError",
    "ConfigurationShapeError",
    "AdapterConstructionError",
    "InvalidAdapterTypeError",
    "UnknownAdapterError",
    "InvalidArgumentError",
    "AmbiguousAdapterError",
]
