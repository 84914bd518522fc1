"""
No-op adapter unit tests
"""

from __future__ import annotations

from polylog.adapters.noop import NoOpLogger, NoOpLoggerFactoryAdapter
from polylog.levels import LogLevel


class TestNoOpAdapter:
    def test_every_level_is_disabled(self):
        logger = NoOpLoggerFactoryAdapter().get_logger("anything")
        assert isinstance(logger, NoOpLogger)
        assert not any(logger.is_enabled(level) for level in LogLevel)

    def test_writes_are_discarded(self):
        logger = NoOpLoggerFactoryAdapter({"level": "debug"}).get_logger(NoOpLogger)
        logger.error("ignored", ValueError("x"), key="value")
        logger.exception("ignored")

    def test_handle_is_shared(self):
        adapter = NoOpLoggerFactoryAdapter()
        assert adapter.get_logger("a") is adapter.get_logger("b")
