"""Handlers module - severity-filtered record sinks"""

from logged.handlers.base_handler import BaseHandler
from logged.handlers.console_handler import ConsoleHandler

__all__ = ["BaseHandler", "ConsoleHandler"]
