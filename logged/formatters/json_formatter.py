"""
JSON formatter for structured output

Formats log records as JSON objects
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Optional

from logged.core.log_record import LogRecord
from logged.formatters.base_formatter import BaseFormatter
from logged.formatters.template_formatter import DEFAULT_DATE_FORMAT, format_date

if TYPE_CHECKING:
    from logged.core.log_level import LevelRegistry


class JSONFormatter(BaseFormatter):
    """
    Format log records as JSON objects.

    Produces one JSON document per record, suitable for log aggregation
    systems reading the console.
    """

    def __init__(
        self,
        include_fields: bool = True,
        date_format: Optional[str] = None,
        indent: int = None,
        ensure_ascii: bool = False,
        levels: Optional["LevelRegistry"] = None,
    ):
        """
        Initialize JSON formatter.

        Args:
            include_fields: Include caller-supplied fields in output
            date_format: Pattern for the timestamp (default: "%i", ISO-8601)
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters
            levels: Level registry used to name levels (default: the
                    registry of the current logging context)

        Example:
            # Compact JSON (one line per record)
            formatter = JSONFormatter()

            # Pretty-printed JSON without caller fields
            formatter = JSONFormatter(include_fields=False, indent=2)
        """
        self.include_fields = include_fields
        self.date_format = date_format or DEFAULT_DATE_FORMAT
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.levels = levels

    def format(self, record: LogRecord) -> str:
        log_dict = {
            "timestamp": format_date(record.created_at, self.date_format),
            "level": self._level_name(record.level),
            "message": record.message,
        }

        if record.name:
            log_dict["logger"] = record.name

        if self.include_fields and record.fields:
            log_dict["fields"] = record.fields

        try:
            return json.dumps(
                log_dict,
                indent=self.indent,
                ensure_ascii=self.ensure_ascii,
                default=str,
            )
        except (TypeError, ValueError):
            log_dict["fields"] = str(record.fields)
            return json.dumps(log_dict, indent=self.indent, ensure_ascii=self.ensure_ascii)

    def _level_name(self, level: Optional[int]) -> Optional[str]:
        if level is None:
            return None
        levels = self.levels
        if levels is None:
            from logged.core.context import get_context
            levels = get_context().levels
        return levels.get_level_name(level)

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
