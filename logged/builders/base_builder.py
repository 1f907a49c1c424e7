"""
Base builder interface

Builders turn the arguments of a logging call into a LogRecord.
"""

from abc import ABC, abstractmethod

from logged.core.log_record import LogRecord


class BaseBuilder(ABC):
    """
    Abstract base class for record builders.

    A builder is stateless. Level and logger name are left unset; the
    emitting logger fills them in.
    """

    @abstractmethod
    def build(self, *args) -> LogRecord:
        """
        Build a record skeleton from call arguments.

        Args:
            *args: Arguments passed to the logging call

        Returns:
            Record with message, creation time and fields
        """
        pass

    def __call__(self, *args) -> LogRecord:
        """Allow builders to be callable."""
        return self.build(*args)
