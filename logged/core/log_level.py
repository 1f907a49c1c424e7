"""
Log levels and the level registry

The registry maps uppercase level names to integer severities. It starts with
the built-in levels and only grows at runtime.
"""

from enum import IntEnum
from typing import Dict, List, Union

from logged.exceptions import UnknownLevel


class LogLevel(IntEnum):
    """
    Built-in log levels.

    Members are plain integers, so they can be used anywhere a severity is
    expected.
    """

    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages
    FATAL = 50      # Unrecoverable errors

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name


DEFAULT_LEVELS: Dict[str, int] = {level.name: int(level) for level in LogLevel}


class LevelRegistry:
    """
    Mapping of level name to severity.

    Names are canonicalized to uppercase. Reverse lookups resolve ties to the
    first registered name; re-registering a name keeps its original position.

    Example:
        levels = LevelRegistry()
        levels.add_level("notice", 25)
        levels.get_level_number("NOTICE")   # 25
        levels.get_level_name(25)           # "NOTICE"
        levels.get_level_name(33)           # "Level(33)"
    """

    def __init__(self, levels: Dict[str, int] = None):
        self._levels: Dict[str, int] = {}
        for name, severity in (levels if levels is not None else DEFAULT_LEVELS).items():
            self.add_level(name, severity)

    @property
    def levels(self) -> Dict[str, int]:
        """Snapshot of the registered levels, in registration order."""
        return dict(self._levels)

    def names(self) -> List[str]:
        return list(self._levels)

    def add_level(self, name: str, severity: int) -> None:
        """
        Register a level, or overwrite the severity of an existing one.

        Args:
            name: Level name, must be a valid identifier
            severity: Integer severity

        Raises:
            ValueError: If name is not an identifier
            TypeError: If severity is not an integer
        """
        if not isinstance(name, str) or not name.isidentifier():
            raise ValueError(f"Invalid level name: {name!r}")
        if isinstance(severity, bool) or not isinstance(severity, int):
            raise TypeError("severity must be an integer")
        self._levels[name.upper()] = int(severity)

    def get_level_name(self, severity: int) -> str:
        for name, value in self._levels.items():
            if value == severity:
                return name
        return f"Level({severity})"

    def get_level_number(self, name: str) -> int:
        try:
            return self._levels[name.upper()]
        except (KeyError, AttributeError):
            raise UnknownLevel(name) from None

    def resolve(self, level: Union[str, int]) -> int:
        """
        Resolve a level name or severity to a severity.

        Args:
            level: Level name (case-insensitive) or integer severity

        Returns:
            Integer severity

        Raises:
            UnknownLevel: If the name is not registered or the value is
                neither a name nor an integer
        """
        if isinstance(level, str):
            return self.get_level_number(level)
        if isinstance(level, int) and not isinstance(level, bool):
            return int(level)
        raise UnknownLevel(level)

    def __contains__(self, name: str) -> bool:
        return isinstance(name, str) and name.upper() in self._levels

    def __repr__(self) -> str:
        return f"LevelRegistry({self._levels})"
