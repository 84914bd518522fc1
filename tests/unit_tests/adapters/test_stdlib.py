"""
Standard library logging adapter unit tests
"""

from __future__ import annotations

import logging

from polylog.adapters.stdlib import POLYLOG_RECORD_FLAG, StdlibLoggerFactoryAdapter
from polylog.levels import LogLevel


class TestStdlibAdapter:
    def test_records_reach_stdlib_logger(self, caplog):
        caplog.set_level(logging.DEBUG, logger="orders")
        adapter = StdlibLoggerFactoryAdapter()

        adapter.get_logger("orders").info("order placed", order_id="o-1")

        record = caplog.records[-1]
        assert record.name == "orders"
        assert record.levelno == logging.INFO
        assert record.getMessage() == "order placed"
        assert record.fields == {"order_id": "o-1"}
        assert getattr(record, POLYLOG_RECORD_FLAG) is True

    def test_prefix_is_prepended(self, caplog):
        caplog.set_level(logging.DEBUG, logger="myapp")
        adapter = StdlibLoggerFactoryAdapter({"prefix": "myapp"})

        handle = adapter.get_logger("billing")
        handle.warn("late payment")

        assert handle.name == "billing"
        assert handle.logger.name == "myapp.billing"
        assert caplog.records[-1].name == "myapp.billing"

    def test_enabled_state_follows_stdlib_level(self):
        adapter = StdlibLoggerFactoryAdapter()
        handle = adapter.get_logger("tests.stdlib.levels")
        handle.logger.setLevel(logging.ERROR)

        assert handle.is_warn_enabled is False
        assert handle.is_error_enabled is True
        assert handle.is_enabled(LogLevel.OFF) is False

    def test_level_property_is_applied(self):
        adapter = StdlibLoggerFactoryAdapter({"level": "warn"})
        handle = adapter.get_logger("tests.stdlib.configured")
        assert handle.logger.level == logging.WARNING

    def test_all_level_enables_everything(self):
        adapter = StdlibLoggerFactoryAdapter({"level": "all"})
        handle = adapter.get_logger("tests.stdlib.all")
        assert handle.logger.level == 1
        assert handle.is_trace_enabled is True

    def test_trace_level_name(self, caplog):
        caplog.set_level(LogLevel.TRACE, logger="tests.stdlib.trace")
        StdlibLoggerFactoryAdapter().get_logger("tests.stdlib.trace").trace("fine detail")
        assert caplog.records[-1].levelname == "TRACE"

    def test_exception_info_is_attached(self, caplog):
        caplog.set_level(logging.ERROR, logger="tests.stdlib.exc")
        try:
            raise KeyError("k")
        except KeyError as exc:
            StdlibLoggerFactoryAdapter().get_logger("tests.stdlib.exc").error("lookup failed", exc)

        record = caplog.records[-1]
        assert record.exc_info[0] is KeyError
        assert "KeyError" in caplog.text
