"""
Built-in logger factory adapters.

- noop: discards everything (fallback when nothing is configured)
- console: aligned console or JSON lines on stdout/stderr
- file: rotating JSON lines file
- stdlib: standard library ``logging``
- structlog: structlog
"""

from .console import ConsoleLoggerFactoryAdapter, ConsoleLogger
from .file import FileLoggerFactoryAdapter, FileLogger
from .noop import NoOpLoggerFactoryAdapter, NoOpLogger
from .stdlib import StdlibLoggerFactoryAdapter, StdlibLogger
from .structlog import StructlogLoggerFactoryAdapter, StructlogLogger

__all__ = [
    "ConsoleLoggerFactoryAdapter",
    "ConsoleLogger",
    "FileLoggerFactoryAdapter",
    "FileLogger",
    "NoOpLoggerFactoryAdapter",
    "NoOpLogger",
    "StdlibLoggerFactoryAdapter",
    "StdlibLogger",
    "StructlogLoggerFactoryAdapter",
    "StructlogLogger",
]
