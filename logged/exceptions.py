"""
Exception hierarchy for the logging façade

All errors are raised synchronously at record construction or level lookup
and propagate to the caller of the logging call.
"""


class LoggedError(Exception):
    """Base exception for all errors raised by the logging façade."""


class MissingArgument(LoggedError, TypeError):
    """A builder was called without any argument."""

    def __init__(self, message: str = "at least one argument is required"):
        super().__init__(message)


class EmptyMessage(LoggedError, ValueError):
    """The normalized record has an empty or missing message."""

    def __init__(self, message: str = "message not specified"):
        super().__init__(message)


class UnknownLevel(LoggedError, ValueError):
    """A level name was not found in the level registry."""

    def __init__(self, level):
        self.level = level
        super().__init__(f"Unknown log level: {level!r}")
