"""
Configuration reader and LoggingSettings unit tests
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from polylog.adapters.console import ConsoleLoggerFactoryAdapter
from polylog.adapters.noop import NoOpLoggerFactoryAdapter
from polylog.config import LOGGING_SECTION, DefaultConfigurationReader, LoggingSettings, StaticConfigurationReader
from polylog.exceptions import UnknownAdapterError
from polylog.manager import LogManager
from polylog.setting import LogSetting


class TestLoggingSettings:
    def test_defaults(self):
        settings = LoggingSettings(_env_file=None)
        assert settings.adapter_names == []
        assert settings.level == "info"

    def test_adapter_names_are_normalized(self, monkeypatch):
        monkeypatch.setenv("POLYLOG_ADAPTERS", " Console , file,, ")
        settings = LoggingSettings(_env_file=None)
        assert settings.adapter_names == ["console", "file"]

    def test_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("POLYLOG_LEVEL", "WARNING")
        assert LoggingSettings(_env_file=None).level == "warn"

    def test_invalid_level_is_rejected(self, monkeypatch):
        monkeypatch.setenv("POLYLOG_LEVEL", "loud")
        with pytest.raises(ValidationError):
            LoggingSettings(_env_file=None)

    def test_properties_for_merges_global_level(self, monkeypatch):
        monkeypatch.setenv("POLYLOG_LEVEL", "debug")
        monkeypatch.setenv("POLYLOG_PROPERTIES", '{"file": {"path": "app.log", "level": "error"}}')
        settings = LoggingSettings(_env_file=None)

        assert settings.properties_for("file") == {"level": "error", "path": "app.log"}
        assert settings.properties_for("console") == {"level": "debug"}

    def test_env_file_is_loaded(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("POLYLOG_ADAPTERS=stdlib\n", encoding="utf-8")
        assert LoggingSettings(_env_file=".env").adapter_names == ["stdlib"]


class TestDefaultConfigurationReader:
    def test_nothing_configured_returns_none(self):
        assert DefaultConfigurationReader().get_section(LOGGING_SECTION) is None

    def test_other_sections_return_none(self, monkeypatch):
        monkeypatch.setenv("POLYLOG_ADAPTERS", "console")
        assert DefaultConfigurationReader().get_section("other") is None

    def test_builds_entries_in_configured_order(self, monkeypatch):
        monkeypatch.setenv("POLYLOG_ADAPTERS", "console,noop")
        monkeypatch.setenv("POLYLOG_PROPERTIES", '{"console": {"stream": "stdout"}}')

        setting = DefaultConfigurationReader().get_section(LOGGING_SECTION)

        assert isinstance(setting, LogSetting)
        assert [entry.adapter for entry in setting] == ["console", "noop"]
        assert dict(setting.entries[0].properties) == {"level": "info", "stream": "stdout"}

    def test_env_file_follows_polylog_env_on_each_read(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env.staging").write_text("POLYLOG_ADAPTERS=stdlib\n", encoding="utf-8")
        (tmp_path / ".env.production").write_text("POLYLOG_ADAPTERS=console,noop\n", encoding="utf-8")
        reader = DefaultConfigurationReader()

        monkeypatch.setenv("POLYLOG_ENV", "staging")
        assert [entry.adapter for entry in reader.get_section(LOGGING_SECTION)] == ["stdlib"]

        monkeypatch.setenv("POLYLOG_ENV", "production")
        assert [entry.adapter for entry in reader.get_section(LOGGING_SECTION)] == ["console", "noop"]

    def test_unknown_adapter_name_fails(self, monkeypatch):
        monkeypatch.setenv("POLYLOG_ADAPTERS", "carrier-pigeon")
        with pytest.raises(UnknownAdapterError):
            DefaultConfigurationReader().get_section(LOGGING_SECTION)

    def test_environment_drives_manager_after_reset(self, monkeypatch):
        manager = LogManager()
        assert isinstance(manager.get_adapter(), NoOpLoggerFactoryAdapter)

        monkeypatch.setenv("POLYLOG_ADAPTERS", "console")
        monkeypatch.setenv("POLYLOG_LEVEL", "error")
        manager.reset()

        adapter = manager.get_adapter()
        assert isinstance(adapter, ConsoleLoggerFactoryAdapter)
        assert manager.get_logger("app").is_warn_enabled is False


class TestStaticConfigurationReader:
    def test_serves_sections(self):
        sentinel = object()
        reader = StaticConfigurationReader({"custom": sentinel})
        assert reader.get_section("custom") is sentinel
        assert reader.get_section(LOGGING_SECTION) is None

    def test_for_logging(self):
        setting = LogSetting.of("noop")
        assert StaticConfigurationReader.for_logging(setting).get_section(LOGGING_SECTION) is setting
