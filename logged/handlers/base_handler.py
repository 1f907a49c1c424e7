"""
Base handler interface
"""

from abc import ABC, abstractmethod
from typing import Optional

from logged.core.log_level import LogLevel
from logged.core.log_record import LogRecord
from logged.formatters.base_formatter import BaseFormatter


class BaseHandler(ABC):
    """
    Abstract base class for handlers.

    A handler drops records below its threshold, renders the rest with its
    formatter and writes the text somewhere.

    Attributes:
        level: Minimum severity handled
        formatter: Formatter used to render records
    """

    def __init__(self, level: int = LogLevel.INFO, formatter: Optional[BaseFormatter] = None):
        self.level = level
        self.formatter = formatter or self._default_formatter()

    def should_handle(self, record: LogRecord) -> bool:
        return record.level is not None and self.level <= record.level

    def handle(self, record: LogRecord) -> None:
        """
        Render and emit a record if it passes the threshold.

        Args:
            record: Finalized record (level and name set)
        """
        if not self.should_handle(record):
            return
        self.emit(self.formatter.format(record), record)

    @abstractmethod
    def emit(self, text: str, record: LogRecord) -> None:
        """
        Write rendered text.

        Args:
            text: Formatted record
            record: The record the text was rendered from
        """
        pass

    def _default_formatter(self) -> BaseFormatter:
        from logged.core.context import get_context
        from logged.formatters.template_formatter import SimpleFormatter
        return get_context().formatters.default_formatter or SimpleFormatter()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level={self.level})"
