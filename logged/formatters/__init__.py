"""
Log formatters module

Provides the formatter implementations that render records to text.
"""

from logged.formatters.base_formatter import BaseFormatter
from logged.formatters.template_formatter import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_TEMPLATE,
    FieldOptions,
    SimpleFormatter,
    format_date,
    parse_options,
)
from logged.formatters.json_formatter import JSONFormatter

__all__ = [
    "BaseFormatter",
    "SimpleFormatter",
    "JSONFormatter",
    "FieldOptions",
    "format_date",
    "parse_options",
    "DEFAULT_TEMPLATE",
    "DEFAULT_DATE_FORMAT",
]
