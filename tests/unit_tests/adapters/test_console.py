"""
Console adapter unit tests
"""

from __future__ import annotations

import io

import orjson
import pytest

from polylog.adapters.console import ConsoleLoggerFactoryAdapter
from polylog.formatters import COLORS, ConsoleFormatter
from polylog.levels import LogLevel


def _adapter(**properties) -> tuple[ConsoleLoggerFactoryAdapter, io.StringIO]:
    stream = io.StringIO()
    return ConsoleLoggerFactoryAdapter(properties, stream=stream), stream


class TestConsoleAdapter:
    def test_console_format_aligns_columns(self):
        adapter, stream = _adapter(show_datetime="false")

        adapter.get_logger("app.service").info("user logged in", user_id=42)

        line = stream.getvalue().rstrip("\n")
        columns = line.split(" | ")
        assert columns[0] == " INFO"
        assert columns[1].strip() == "app.service"
        assert len(columns[1]) == 32
        assert columns[2] == "user logged in user_id=42"

    def test_json_format(self):
        adapter, stream = _adapter(format="json")

        adapter.get_logger("app").warn("disk almost full", free_mb=12)

        event = orjson.loads(stream.getvalue())
        assert event["level"] == "WARN"
        assert event["logger"] == "app"
        assert event["message"] == "disk almost full"
        assert event["free_mb"] == 12
        assert "timestamp" in event

    def test_level_threshold(self):
        adapter, stream = _adapter(level="error", format="json")
        logger = adapter.get_logger("app")

        logger.info("dropped")
        logger.error("kept")

        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        assert orjson.loads(lines[0])["message"] == "kept"
        assert logger.is_info_enabled is False

    def test_exception_is_rendered(self):
        adapter, stream = _adapter(show_datetime="false")
        try:
            raise RuntimeError("kaboom")
        except RuntimeError as exc:
            adapter.get_logger("app").error("request failed", exc)

        output = stream.getvalue()
        assert "request failed" in output
        assert "Traceback" in output
        assert "RuntimeError: kaboom" in output

    def test_no_color_for_non_tty_stream(self):
        adapter, stream = _adapter()
        adapter.get_logger("app").info("plain")
        assert "\033[" not in stream.getvalue()

    def test_color_can_be_forced(self):
        adapter, stream = _adapter(color="true")
        adapter.get_logger("app").info("colored")
        assert COLORS["reset"] in stream.getvalue()

    def test_is_enabled_accepts_level_names(self):
        adapter, _ = _adapter(level="warn")
        logger = adapter.get_logger("app")
        assert logger.is_enabled("warn") is True
        assert logger.is_enabled("info") is False

    def test_handles_are_cached_per_name(self):
        adapter, _ = _adapter()
        assert adapter.get_logger("a") is adapter.get_logger("a")
        assert adapter.get_logger("a") is not adapter.get_logger("b")

    @pytest.mark.parametrize("properties", [{"format": "xml"}, {"stream": "stdlog"}, {"level": "loud"}])
    def test_invalid_properties_are_rejected(self, properties):
        with pytest.raises(ValueError):
            ConsoleLoggerFactoryAdapter(properties)

    def test_stream_follows_redirected_stdout(self, capsys):
        adapter = ConsoleLoggerFactoryAdapter({"stream": "stdout", "format": "json"})
        adapter.get_logger("app").info("to stdout")

        captured = capsys.readouterr()
        assert "to stdout" in captured.out
        assert captured.err == ""

    def test_zero_argument_construction(self):
        adapter = ConsoleLoggerFactoryAdapter()
        assert adapter.level is LogLevel.ALL
        assert adapter.format == "console"


class TestConsoleFormatter:
    def test_long_logger_names_are_truncated_from_the_left(self):
        formatter = ConsoleFormatter(show_datetime=False, logger_width=10)
        line = formatter.format({"level": "INFO", "logger": "very.long.module.name", "message": "m"})
        assert line.split(" | ")[1] == "...le.name"

    def test_datetime_column(self):
        formatter = ConsoleFormatter(timestamp_format="%Y")
        line = formatter.format({"level": "INFO", "logger": "a", "message": "m", "timestamp": "2024-06-01T12:00:00+00:00"})
        assert line.startswith("2024 | ")
