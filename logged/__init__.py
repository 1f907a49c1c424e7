"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Logged - A hierarchical, level-filtered logging façade
Named loggers form a tree under one root; records propagate to the root
and are rendered by template-driven handlers.
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from typing import Any, Union

from logged.core.log_level import LogLevel, LevelRegistry
from logged.core.log_record import LogRecord
from logged.core.logger import Logger, RootLogger
from logged.core.logging_config import LoggingConfig
from logged.core.context import LoggingContext, get_context, set_context, reset_context
from logged.exceptions import LoggedError, MissingArgument, EmptyMessage, UnknownLevel
from logged.registry import BuilderRegistry, FormatterRegistry, HandlerRegistry

# Import submodules (not all classes by default)
from logged import builders
from logged import formatters
from logged import handlers

TRACE = LogLevel.TRACE
DEBUG = LogLevel.DEBUG
INFO = LogLevel.INFO
WARN = LogLevel.WARN
ERROR = LogLevel.ERROR
FATAL = LogLevel.FATAL


def get_logger(name: str = None) -> Logger:
    """Get a logger by dotted name; ``"root"`` or no name gives the root."""
    return get_context().get_logger(name)


def root() -> RootLogger:
    return get_context().root


def add_level(name: str, severity: int) -> None:
    """Register a level, callable right away as ``logged.<name>()`` and on every logger."""
    get_context().add_level(name, severity)


def get_level(value: Union[str, int]) -> Union[str, int]:
    """Severity for a level name, or name for a severity."""
    return get_context().get_level(value)


def log(level: Union[str, int], *args: Any) -> None:
    get_context().root.log(level, *args)


def trace(*args: Any) -> None:
    get_context().root.trace(*args)


def debug(*args: Any) -> None:
    get_context().root.debug(*args)


def info(*args: Any) -> None:
    get_context().root.info(*args)


def warn(*args: Any) -> None:
    get_context().root.warn(*args)


def error(*args: Any) -> None:
    get_context().root.error(*args)


def fatal(*args: Any) -> None:
    get_context().root.fatal(*args)


def handler_registry() -> HandlerRegistry:
    return get_context().handlers


def formatter_registry() -> FormatterRegistry:
    return get_context().formatters


def builder_registry() -> BuilderRegistry:
    return get_context().builders


def flush() -> None:
    get_context().flush()


def __getattr__(attr: str) -> Any:
    # Runtime-registered levels: ``logged.NOTICE`` and ``logged.notice(...)``
    if not attr.startswith("_"):
        levels = get_context().levels
        if attr.isupper() and attr in levels:
            return levels.get_level_number(attr)
        if attr.islower() and attr in levels:
            return getattr(get_context().root, attr)
    raise AttributeError(f"module 'logged' has no attribute '{attr}'")


__all__ = [
    "Logger",
    "RootLogger",
    "LogRecord",
    "LogLevel",
    "LevelRegistry",
    "LoggingConfig",
    "LoggingContext",
    "LoggedError",
    "MissingArgument",
    "EmptyMessage",
    "UnknownLevel",
    "HandlerRegistry",
    "FormatterRegistry",
    "BuilderRegistry",
    "get_context",
    "set_context",
    "reset_context",
    "get_logger",
    "root",
    "add_level",
    "get_level",
    "log",
    "trace",
    "debug",
    "info",
    "warn",
    "error",
    "fatal",
    "handler_registry",
    "formatter_registry",
    "builder_registry",
    "flush",
    "TRACE",
    "DEBUG",
    "INFO",
    "WARN",
    "ERROR",
    "FATAL",
    "builders",
    "formatters",
    "handlers",
]
