"""
Logging Backend Configuration.
"""

import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..levels import LogLevel


def _get_env_files() -> tuple[str, ...]:
    """
    Determine which .env files to load based on POLYLOG_ENV.

    Later files override earlier ones.
    """
    env = os.getenv("POLYLOG_ENV", "development")
    return (
        ".env",
        ".env.local",
        f".env.{env}",
        f".env.{env}.local",
    )


class LoggingSettings(BaseSettings):
    """Adapter selection read from the environment.

    Example:
        POLYLOG_ADAPTERS=console,file
        POLYLOG_LEVEL=debug
        POLYLOG_PROPERTIES='{"file": {"path": "logs/app.jsonl"}}'
    """

    model_config = SettingsConfigDict(
        env_prefix="POLYLOG_",
        env_file=_get_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    adapters: str = Field(default="", description="Comma-separated adapter names (console, file, stdlib, structlog, noop)")
    level: str = Field(default="info", description="Default threshold passed to adapters as the 'level' property")
    properties: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        description="Per-adapter properties, keyed by adapter name",
    )

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        return LogLevel.parse(value).name.lower()

    @property
    def adapter_names(self) -> list[str]:
        return [name.strip().lower() for name in self.adapters.split(",") if name.strip()]

    def properties_for(self, name: str) -> dict[str, str]:
        """Properties for ``name`` with the global level as fallback."""
        merged = {"level": self.level}
        merged.update(self.properties.get(name, {}))
        return merged
