"""
Logging configuration
"""

from dataclasses import dataclass

from logged.core.log_level import LogLevel
from logged.formatters.template_formatter import DEFAULT_DATE_FORMAT, DEFAULT_TEMPLATE


@dataclass
class LoggingConfig:
    """
    Configuration of a logging context.

    Attributes:
        root_name: Name reported by the root logger
        internal_name: Logger name used for the library's own notices
        default_level: Severity of records emitted without a level
        handler_level: Threshold of the handler attached on root fallback
        template: Template of the default formatter
        date_format: Date pattern of the default formatter
        async_dispatch: Run handlers on a worker thread
        queue_size: Capacity of the dispatch queue (async only)
        root_reports_own_name: Root handlers see ``root_name`` instead of
            the originating logger's name
    """

    # Hierarchy settings
    root_name: str = "root"
    internal_name: str = "logged"
    default_level: int = LogLevel.INFO

    # Output settings
    handler_level: int = LogLevel.INFO
    template: str = DEFAULT_TEMPLATE
    date_format: str = DEFAULT_DATE_FORMAT
    root_reports_own_name: bool = False

    # Dispatch settings
    async_dispatch: bool = True
    queue_size: int = 10000

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.root_name:
            raise ValueError("root_name cannot be empty")
        if not self.internal_name:
            raise ValueError("internal_name cannot be empty")
        if not isinstance(self.default_level, int):
            raise ValueError("default_level must be an integer severity")
        if not isinstance(self.handler_level, int):
            raise ValueError("handler_level must be an integer severity")
        if not self.template:
            raise ValueError("template cannot be empty")
        if self.queue_size <= 0:
            raise ValueError("queue_size must be positive")

    @classmethod
    def default(cls) -> "LoggingConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggingConfig":
        """Create configuration for debugging."""
        return cls(
            default_level=LogLevel.DEBUG,
            handler_level=LogLevel.TRACE,
            async_dispatch=False,  # Synchronous for debugging
        )

    @classmethod
    def performance_config(cls) -> "LoggingConfig":
        """Create configuration optimized for throughput."""
        return cls(
            handler_level=LogLevel.WARN,
            async_dispatch=True,
            queue_size=50000,
        )
