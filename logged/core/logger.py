"""
Logger hierarchy

Loggers form a tree under a single root. Records emitted on a logger are
handed to its own handlers, then forwarded unchanged to its parent.
"""

from __future__ import annotations

import os
import traceback
from dataclasses import replace
from functools import partial
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Union

from logged.core.log_level import LogLevel
from logged.core.log_record import LogRecord

if TYPE_CHECKING:
    from logged.builders.base_builder import BaseBuilder
    from logged.core.context import LoggingContext
    from logged.handlers.base_handler import BaseHandler


LOGGER_SEPARATOR = "."

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def caller_stack() -> str:
    """Formatted call stack up to the innermost frame outside this package."""
    frames = traceback.extract_stack()
    while frames and os.path.abspath(frames[-1].filename).startswith(_PACKAGE_DIR + os.sep):
        frames.pop()
    return "".join(traceback.format_list(frames)).rstrip("\n")


class Logger:
    """
    Named node of the logger tree.

    Per-level calls exist for the built-in levels (``logger.info(...)``);
    levels registered at runtime are reachable the same way
    (``logger.notice(...)``) as well as through ``logger.log("notice", ...)``.

    Attributes:
        segment: Own name segment
        parent: Parent logger, fixed at creation
        children: Child loggers keyed by segment
        handlers: Attached handlers, in attachment order
        default_level: Severity of records emitted without a level
        propagate: Forward records to the parent
        builder: Builder turning call arguments into records
    """

    def __init__(
        self,
        segment: str,
        context: "LoggingContext",
        parent: Optional["Logger"] = None,
        default_level: Optional[int] = None,
        builder: Optional["BaseBuilder"] = None,
        handlers: Optional[List["BaseHandler"]] = None,
    ):
        self.segment = segment
        self.parent = parent
        self.children: Dict[str, Logger] = {}
        self.handlers: List[BaseHandler] = list(handlers or [])
        self.default_level = context.config.default_level if default_level is None else default_level
        self.propagate = True
        self.builder = builder or context.builders.default_builder
        self._context = context

    @property
    def is_root(self) -> bool:
        return False

    @property
    def name(self) -> str:
        """Full dotted name, computed from the current parent chain."""
        if self.parent is None or self.parent.is_root:
            return self.segment
        return f"{self.parent.name}{LOGGER_SEPARATOR}{self.segment}"

    @property
    def context(self) -> "LoggingContext":
        return self._context

    def get_child(self, segment: str) -> "Logger":
        """
        Get or create the child logger for ``segment``.

        Children inherit this logger's default level and builder.
        """
        child = self.children.get(segment)
        if child is None:
            child = Logger(
                segment,
                self._context,
                parent=self,
                default_level=self.default_level,
                builder=self.builder,
            )
            self.children[segment] = child
        return child

    def add_handler(self, handler: "BaseHandler") -> "Logger":
        """
        Attach a handler.

        The same handler may be attached more than once; it then receives
        each record once per attachment.

        Returns:
            Self for method chaining
        """
        self.handlers.append(handler)
        return self

    def log(self, level: Union[str, int], *args: Any) -> None:
        """
        Build a record from ``args`` and emit it at ``level``.

        Args:
            level: Level name (case-insensitive) or integer severity
            *args: Builder arguments (payload first)

        Raises:
            UnknownLevel: If level is an unregistered name
            MissingArgument: If no builder argument is given
            EmptyMessage: If the record has no message
        """
        severity = self._context.levels.resolve(level)
        record = self.builder.build(*args)
        if severity < LogLevel.DEBUG and record.stack is None:
            record = replace(record, stack=caller_stack())
        self.handle(replace(record, level=severity))

    def handle(self, record: LogRecord) -> None:
        """
        Deliver a record to this logger's handlers, then to its ancestors.

        Missing level and name are filled from this logger. The finalized
        record is forwarded as is, so ancestors see the originating
        logger's name and level.
        """
        record = self._finalize(record)
        self._call_handlers(record)
        if self.propagate and self.parent is not None:
            self.parent.handle(record)

    def _finalize(self, record: LogRecord) -> LogRecord:
        if isinstance(record.level, str):
            record = replace(record, level=self._context.levels.get_level_number(record.level))
        return record.with_defaults(level=self.default_level, name=self.name)

    def _call_handlers(self, record: LogRecord) -> None:
        dispatcher = self._context.dispatcher
        for handler in self.handlers:
            if handler.level <= record.level:
                dispatcher.submit(handler, record)

    def trace(self, *args: Any) -> None:
        """Log trace message."""
        self.log("TRACE", *args)

    def debug(self, *args: Any) -> None:
        """Log debug message."""
        self.log("DEBUG", *args)

    def info(self, *args: Any) -> None:
        """Log info message."""
        self.log("INFO", *args)

    def warn(self, *args: Any) -> None:
        """Log warning message."""
        self.log("WARN", *args)

    def error(self, *args: Any) -> None:
        """Log error message."""
        self.log("ERROR", *args)

    def fatal(self, *args: Any) -> None:
        """Log fatal message."""
        self.log("FATAL", *args)

    def __getattr__(self, attr: str) -> Callable[..., None]:
        # Per-level calls for levels registered after the class was defined
        if attr.startswith("_") or not attr.islower():
            raise AttributeError(attr)
        context = self.__dict__.get("_context")
        if context is None or attr not in context.levels:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{attr}'")
        return partial(self.log, attr.upper())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} handlers={len(self.handlers)}>"


class RootLogger(Logger):
    """
    Root of the logger tree.

    Its segment never appears in descendants' names. When a record reaches
    a root without handlers, the registry's default handler is attached and
    a one-time notice is sent to it.
    """

    def __init__(self, context: "LoggingContext"):
        super().__init__(context.config.root_name, context)
        self._fallback_notified = False

    @property
    def is_root(self) -> bool:
        return True

    @property
    def name(self) -> str:
        return self.segment

    def handle(self, record: LogRecord) -> None:
        if not self.handlers:
            self._attach_fallback_handler()
        record = self._finalize(record)
        if self._context.config.root_reports_own_name:
            record = replace(record, name=self.name)
        self._call_handlers(record)

    def _attach_fallback_handler(self) -> None:
        handler = self._context.handlers.default_handler
        if handler is None:
            from logged.handlers.console_handler import ConsoleHandler
            handler = ConsoleHandler(self._context.config.handler_level)
        self.add_handler(handler)
        if not self._fallback_notified:
            self._fallback_notified = True
            self._bootstrap_notice("implicitly added default handler to root")

    def _bootstrap_notice(self, message: str) -> None:
        """
        Send an internal notice straight to the root's handlers.

        The notice bypasses propagation and fallback, so it can never
        re-enter ``handle``.
        """
        record = self.builder.build(message)
        record = replace(record, level=LogLevel.WARN, name=self._context.config.internal_name)
        self._call_handlers(record)
