"""
Default record builder

Normalizes heterogeneous call arguments into a LogRecord.
"""

import json
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

from logged.builders.base_builder import BaseBuilder
from logged.core.log_record import LogRecord, utc_now
from logged.exceptions import EmptyMessage, MissingArgument


class PayloadKind(Enum):
    """Shape of the first argument of a logging call."""

    STRUCTURED = "structured"
    TEXT = "text"
    OTHER = "other"


# Keys of a structured payload that map onto record attributes
_RECORD_KEYS = {
    "message": "message",
    "level": "level",
    "name": "name",
    "createdAt": "created_at",
    "created_at": "created_at",
}


def classify(value: Any) -> PayloadKind:
    if isinstance(value, Mapping):
        return PayloadKind.STRUCTURED
    if isinstance(value, str):
        return PayloadKind.TEXT
    return PayloadKind.OTHER


def stringify(value: Any) -> str:
    """
    Text form of a non-text value.

    Composite values are serialized as JSON; anything JSON cannot represent
    falls back to ``str``.
    """
    if isinstance(value, (list, tuple, dict)):
        try:
            return json.dumps(value, default=str)
        except (TypeError, ValueError):
            return str(value)
    if value is None or isinstance(value, (bool, int, float)):
        return json.dumps(value)
    return str(value)


def _timestamp(value: Any):
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, timezone.utc)
        except (OverflowError, ValueError, OSError):
            return None
    return None


class SimpleBuilder(BaseBuilder):
    """
    Build records from ``(payload, *args)`` calls.

    The first argument decides the shape of the record:
    - a mapping is merged into the record; its ``message`` key (if any)
      becomes the message and the other keys become fields
    - a string becomes the message verbatim
    - anything else is stringified to become the message

    Remaining arguments are stored in the ``args`` field.

    Example:
        builder = SimpleBuilder()
        builder.build("user logged in", user)
        builder.build({"message": "hi", "userId": 5})
    """

    def build(self, *args) -> LogRecord:
        if not args:
            raise MissingArgument()

        first, rest = args[0], list(args[1:])
        attributes, fields = self._split(first, rest)

        message = attributes.get("message")
        if message is None or message == "":
            raise EmptyMessage()
        if not isinstance(message, str):
            message = stringify(message)

        created_at = _timestamp(attributes.get("created_at"))
        return LogRecord(
            message=message,
            level=attributes.get("level"),
            name=attributes.get("name"),
            created_at=created_at or utc_now(),
            fields=fields,
        )

    def _split(self, first: Any, rest: list) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """Split the payload into record attributes and free-form fields."""
        attributes: Dict[str, Any] = {}
        fields: Dict[str, Any] = {"args": rest}

        kind = classify(first)
        if kind is PayloadKind.STRUCTURED:
            for key, value in first.items():
                target = _RECORD_KEYS.get(key)
                if target is None:
                    fields[str(key)] = value
                elif target == "created_at" and _timestamp(value) is None:
                    fields[key] = value
                else:
                    attributes[target] = value
        elif kind is PayloadKind.TEXT:
            attributes["message"] = first
        else:
            attributes["message"] = stringify(first)
        return attributes, fields

    def __repr__(self) -> str:
        return "SimpleBuilder()"
