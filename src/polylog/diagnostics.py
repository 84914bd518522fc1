"""
Internal diagnostic trace for polylog itself.

The façade cannot log through itself while it is still resolving its own
backends, so diagnostics go to the stdlib ``polylog`` logger hierarchy through
a structlog wrapper. Messages are emitted at DEBUG and stay silent unless the
host application enables that logger.
"""

from __future__ import annotations

import logging

import structlog

_PROCESSORS = [
    structlog.processors.add_log_level,
    structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
]


def get_diagnostic_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get the structured diagnostic logger for ``polylog.<name>``."""
    return structlog.wrap_logger(
        logging.getLogger(f"polylog.{name}"),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


__all__ = ["get_diagnostic_logger"]
