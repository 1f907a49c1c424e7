"""
Log record data structure

A record is built once per logging call and shared, unchanged, by every
handler along the propagation chain.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Sequence


class _Missing:
    """Placeholder for template paths that do not resolve."""

    def __repr__(self) -> str:
        return "MISSING"

    def __str__(self) -> str:
        return "None"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LogRecord:
    """
    Log record data structure.

    Attributes:
        message: Log message text
        level: Integer severity, None until the emitting logger fills it
        name: Full dotted logger name, None until the emitting logger fills it
        created_at: Creation instant (timezone-aware)
        fields: Additional caller-supplied data, including ``args``
        stack: Call stack of the logging call, captured for trace-band records
    """

    message: str
    level: Optional[int] = None
    name: Optional[str] = None
    created_at: datetime = field(default_factory=utc_now)
    fields: Dict[str, Any] = field(default_factory=dict)
    stack: Optional[str] = field(default=None, repr=False, compare=False)

    def with_defaults(self, level: Optional[int] = None, name: Optional[str] = None) -> "LogRecord":
        """
        Fill level/name when they are not set yet.

        Returns:
            This record when nothing changes, otherwise a copy
        """
        changes = {}
        if self.level is None and level is not None:
            changes["level"] = level
        if self.name is None and name is not None:
            changes["name"] = name
        return replace(self, **changes) if changes else self

    def to_dict(self) -> Dict[str, Any]:
        """
        Template view of the record.

        Caller fields come first; the record's own attributes use the
        template names (``createdAt``) and always win.
        """
        data = dict(self.fields)
        data["level"] = self.level
        data["name"] = self.name
        data["createdAt"] = self.created_at
        data["message"] = self.message
        return data

    def resolve(self, path: str) -> Any:
        """
        Look up a dotted path such as ``args.0`` or ``user.id``.

        Args:
            path: Dot-separated path

        Returns:
            Resolved value, or MISSING when any segment does not resolve
        """
        current: Any = self.to_dict()
        for segment in path.split("."):
            if isinstance(current, Mapping):
                if segment not in current:
                    return MISSING
                current = current[segment]
            elif isinstance(current, Sequence) and not isinstance(current, str) and segment.isdigit():
                index = int(segment)
                if index >= len(current):
                    return MISSING
                current = current[index]
            elif segment and not segment.startswith("_") and hasattr(current, segment):
                current = getattr(current, segment)
            else:
                return MISSING
        return current
