"""
Logging context

A context bundles everything the logger tree shares: configuration, level
registry, component registries, dispatcher and the root logger. The module
keeps one process-wide default context, created on first use, which tests
and embedding applications may swap out.
"""

from __future__ import annotations

from typing import Optional, Union

from logged.builders.simple_builder import SimpleBuilder
from logged.core.dispatcher import AsyncDispatcher, SyncDispatcher
from logged.core.log_level import LevelRegistry
from logged.core.logger import LOGGER_SEPARATOR, Logger, RootLogger
from logged.core.logging_config import LoggingConfig
from logged.formatters.json_formatter import JSONFormatter
from logged.formatters.template_formatter import SimpleFormatter
from logged.handlers.console_handler import ConsoleHandler
from logged.registry import BuilderRegistry, FormatterRegistry, HandlerRegistry


class LoggingContext:
    """
    Shared state of one logger tree.

    Example:
        context = LoggingContext(LoggingConfig.debug_config())
        context.get_logger("svc.db").add_handler(ConsoleHandler()).info("ready")
    """

    def __init__(self, config: Optional[LoggingConfig] = None):
        self.config = config or LoggingConfig.default()
        self.levels = LevelRegistry()

        self.builders = BuilderRegistry()
        self.builders.add_builder("SimpleBuilder", SimpleBuilder)
        self.builders.default_builder = SimpleBuilder()

        self.formatters = FormatterRegistry()
        self.formatters.add_formatter("SimpleFormatter", SimpleFormatter)
        self.formatters.add_formatter("JSONFormatter", JSONFormatter)
        self.formatters.default_formatter = SimpleFormatter(
            self.config.template, self.config.date_format, levels=self.levels
        )

        self.handlers = HandlerRegistry()
        self.handlers.add_handler("ConsoleHandler", ConsoleHandler)
        self.handlers.default_handler = ConsoleHandler(
            self.config.handler_level, formatter=self.formatters.default_formatter
        )

        if self.config.async_dispatch:
            self.dispatcher = AsyncDispatcher(self.config.queue_size, name=self.config.internal_name)
        else:
            self.dispatcher = SyncDispatcher()

        self._root: Optional[RootLogger] = None

    @property
    def root(self) -> RootLogger:
        """Root logger, created on first access."""
        if self._root is None:
            self._root = RootLogger(self)
        return self._root

    def get_logger(self, name: Optional[str] = None) -> Logger:
        """
        Get the logger for a dotted name, creating missing nodes.

        Args:
            name: Dotted name; None, "" or the root name give the root

        Returns:
            Logger instance (the same one for the same name)
        """
        if not name or name == self.config.root_name:
            return self.root
        logger: Logger = self.root
        for segment in name.split(LOGGER_SEPARATOR):
            logger = logger.get_child(segment)
        return logger

    def add_level(self, name: str, severity: int) -> None:
        """Register a level; it is callable on every logger right away."""
        self.levels.add_level(name, severity)

    def get_level(self, value: Union[str, int]) -> Union[str, int]:
        """
        Look up a level in either direction.

        Args:
            value: Level name or severity

        Returns:
            Severity for a name, name for a severity

        Raises:
            UnknownLevel: If a name is not registered
        """
        if isinstance(value, str):
            return self.levels.get_level_number(value)
        return self.levels.get_level_name(value)

    def flush(self) -> None:
        """Wait for scheduled handler work to finish."""
        self.dispatcher.flush()
        for handler in self.root.handlers:
            if hasattr(handler, "flush"):
                handler.flush()

    def shutdown(self) -> None:
        """Drain and stop dispatching."""
        self.dispatcher.shutdown()

    def get_metrics(self) -> dict:
        """Get dispatch metrics."""
        return self.dispatcher.get_metrics()


_default_context: Optional[LoggingContext] = None


def get_context() -> LoggingContext:
    """Process-wide default context, created on first use."""
    global _default_context
    if _default_context is None:
        _default_context = LoggingContext()
    return _default_context


def set_context(context: Optional[LoggingContext]) -> Optional[LoggingContext]:
    """
    Replace the default context.

    Returns:
        The previous default context (None if none was created yet)
    """
    global _default_context
    previous = _default_context
    _default_context = context
    return previous


def reset_context() -> None:
    """Shut down the default context; the next use creates a fresh one."""
    previous = set_context(None)
    if previous is not None:
        previous.shutdown()
