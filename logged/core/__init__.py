"""
Core module for the logging façade

This module contains the fundamental classes:
- Logger / RootLogger: the logger tree and propagation
- LogRecord: record data structure
- LogLevel / LevelRegistry: level names and severities
- LoggingConfig: configuration
- LoggingContext: shared state of one logger tree
"""

from logged.core.log_level import LogLevel, LevelRegistry, DEFAULT_LEVELS
from logged.core.log_record import LogRecord, MISSING
from logged.core.logging_config import LoggingConfig
from logged.core.logger import Logger, RootLogger, LOGGER_SEPARATOR
from logged.core.dispatcher import SyncDispatcher, AsyncDispatcher
from logged.core.context import LoggingContext, get_context, set_context, reset_context

__all__ = [
    "LogLevel",
    "LevelRegistry",
    "DEFAULT_LEVELS",
    "LogRecord",
    "MISSING",
    "LoggingConfig",
    "Logger",
    "RootLogger",
    "LOGGER_SEPARATOR",
    "SyncDispatcher",
    "AsyncDispatcher",
    "LoggingContext",
    "get_context",
    "set_context",
    "reset_context",
]
