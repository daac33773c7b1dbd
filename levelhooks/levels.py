"""Severity levels used as dispatch keys for hooks."""

from enum import IntEnum
from typing import Any

from .exceptions import InvalidLevelError


__all__ = ["ALL_LEVELS", "Level", "parse_level"]


class Level(IntEnum):
    """Log severity, most severe first."""

    PANIC = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6

    def __str__(self) -> str:
        return self.name.lower()


ALL_LEVELS: tuple[Level, ...] = tuple(Level)

_ALIASES = {"warning": Level.WARN}


def parse_level(value: Any) -> Level:
    """Coerce ``value`` into a :class:`Level`.

    Accepts a ``Level``, an integer within range, or a case-insensitive level
    name. ``"warning"`` is accepted as an alias of ``"warn"``.

    Raises:
        InvalidLevelError: If the value does not name a known level
    """
    if isinstance(value, Level):
        return value
    # bool is an int subclass but never a level
    if isinstance(value, bool):
        raise InvalidLevelError(value)
    if isinstance(value, int):
        try:
            return Level(value)
        except ValueError:
            raise InvalidLevelError(value) from None
    if isinstance(value, str):
        name = value.strip().lower()
        if name in _ALIASES:
            return _ALIASES[name]
        try:
            return Level[name.upper()]
        except KeyError:
            raise InvalidLevelError(value) from None
    raise InvalidLevelError(value)
