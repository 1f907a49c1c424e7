"""
Template formatter

Renders a record through a template with embedded field references:

    {path}            value at ``path`` (dotted, e.g. ``args.0``)
    {path:options}    value transformed by ``options``

Options are read left to right:
    ?       render nothing when the value is empty
    0       pad with zeros instead of spaces
    digits  minimum width of the integer part
    .digits minimum width of the fractional part
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional

from logged.core.log_record import LogRecord, MISSING
from logged.formatters.base_formatter import BaseFormatter

if TYPE_CHECKING:
    from logged.core.log_level import LevelRegistry


DEFAULT_TEMPLATE = "[{createdAt}][{name}] {level}: {message} {args:?}"
DEFAULT_DATE_FORMAT = "%i"

FIELD_PATTERN = re.compile(r"\{([A-Za-z][A-Za-z0-9_.]*)(?::([^{}]*))?\}")
OPTIONS_PATTERN = re.compile(r"(\?)?(0)?(\d*)(?:\.(\d*))?")

# Rendered contents that count as empty for the ``?`` option
EMPTY_CONTENT = frozenset({"", "{}", "[]"})


def _iso(value: datetime) -> str:
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


DATE_DIRECTIVES: Dict[str, Callable[[datetime], str]] = {
    "Y": lambda d: f"{d.year:04d}",
    "m": lambda d: f"{d.month:02d}",
    "d": lambda d: f"{d.day:02d}",
    "H": lambda d: f"{d.hour:02d}",
    "M": lambda d: f"{d.minute:02d}",
    "S": lambda d: f"{d.second:02d}",
    "i": _iso,
}


def format_date(value: datetime, date_format: str) -> str:
    """
    Render a datetime in UTC through a ``%``-directive pattern.

    Unknown directives are dropped; ``%%`` renders a literal percent.
    Naive datetimes are taken to be UTC already.

    Example:
        format_date(datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc), "%Y/%m/%d")
        # "2024/01/02"
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)

    result = []
    idx = 0
    while idx < len(date_format):
        char = date_format[idx]
        if char == "%":
            idx += 1
            if idx < len(date_format):
                directive = date_format[idx]
                if directive == "%":
                    result.append("%")
                elif directive in DATE_DIRECTIVES:
                    result.append(DATE_DIRECTIVES[directive](value))
        else:
            result.append(char)
        idx += 1
    return "".join(result)


@dataclass(frozen=True)
class FieldOptions:
    """Parsed options of a single field reference."""

    skip_empty: bool = False
    pad: str = " "
    width: int = 0
    decimals: int = 0

    def apply(self, content: str, absent: bool = False) -> str:
        """
        Transform rendered content.

        ``absent`` marks content rendered from a missing or None value.
        Padding only grows content, it never truncates.
        """
        if self.skip_empty and (absent or content in EMPTY_CONTENT):
            return ""
        if not self.width and not self.decimals:
            return content

        head, sep, tail = content.partition(".")
        head = head.rjust(self.width, self.pad)
        if self.decimals:
            return f"{head}.{tail.ljust(self.decimals, self.pad)}"
        return head + sep + tail


@lru_cache(maxsize=256)
def parse_options(options: Optional[str]) -> FieldOptions:
    """
    Parse the options part of a field reference.

    Malformed options are ignored rather than rejected.

    Example:
        parse_options("?")    # FieldOptions(skip_empty=True)
        parse_options("03")   # FieldOptions(pad="0", width=3)
        parse_options("0.2")  # FieldOptions(pad="0", decimals=2)
    """
    if not options:
        return FieldOptions()
    match = OPTIONS_PATTERN.fullmatch(options)
    if match is None:
        return FieldOptions()
    skip, zero, width, decimals = match.groups()
    return FieldOptions(
        skip_empty=skip is not None,
        pad="0" if zero else " ",
        width=int(width) if width else 0,
        decimals=int(decimals) if decimals else 0,
    )


class SimpleFormatter(BaseFormatter):
    """
    Format log records using a field-reference template.

    Example:
        # Default format: "[2024-01-02T03:04:05.000Z][svc.db] INFO: ok "
        formatter = SimpleFormatter()

        # Custom format with padding and a date pattern
        formatter = SimpleFormatter(
            "{createdAt} {level:5} {message} took {elapsed:0.3}s",
            date_format="%H:%M:%S",
        )
    """

    def __init__(
        self,
        fmt: Optional[str] = None,
        date_format: Optional[str] = None,
        levels: Optional["LevelRegistry"] = None,
    ):
        """
        Initialize template formatter.

        Args:
            fmt: Template string (default: DEFAULT_TEMPLATE)
            date_format: Pattern for datetime values (default: "%i", ISO-8601)
            levels: Level registry used to name levels (default: the
                    registry of the current logging context)
        """
        self.fmt = fmt or DEFAULT_TEMPLATE
        self.date_format = date_format or DEFAULT_DATE_FORMAT
        self.levels = levels

    def format(self, record: LogRecord) -> str:
        def substitute(match: "re.Match") -> str:
            path, options = match.group(1), match.group(2)
            try:
                value = record.resolve(path)
                content = self.render_value(path, value)
                return parse_options(options).apply(content, value is MISSING or value is None)
            except Exception:
                # Rendering must never break the logging call
                return ""

        return FIELD_PATTERN.sub(substitute, self.fmt)

    def render_value(self, path: str, value: Any) -> str:
        """Convert a resolved value to text, before options are applied."""
        if value is MISSING:
            return str(MISSING)
        if isinstance(value, datetime):
            return format_date(value, self.date_format)
        if path == "level" and isinstance(value, int) and not isinstance(value, bool):
            return self._level_registry().get_level_name(value)
        if isinstance(value, str):
            return value
        if isinstance(value, (Mapping, list, tuple)):
            try:
                return json.dumps(value, default=str)
            except (TypeError, ValueError):
                return str(value)
        return str(value)

    def _level_registry(self) -> "LevelRegistry":
        if self.levels is not None:
            return self.levels
        from logged.core.context import get_context
        return get_context().levels

    def __repr__(self) -> str:
        """String representation."""
        return f"SimpleFormatter(fmt='{self.fmt}', date_format='{self.date_format}')"
