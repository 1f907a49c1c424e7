"""
Base formatter interface
"""

from abc import ABC, abstractmethod

from logged.core.log_record import LogRecord


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogRecord objects into formatted strings.
    """

    @abstractmethod
    def format(self, record: LogRecord) -> str:
        """
        Format a log record into a string.

        Args:
            record: The log record to format

        Returns:
            Formatted string representation of the log record
        """
        pass

    def __call__(self, record: LogRecord) -> str:
        """Allow formatters to be callable."""
        return self.format(record)
