"""Hook forwarding log entries to structlog."""

from collections.abc import Iterable
from typing import Any

import structlog

from ..levels import ALL_LEVELS, Level, parse_level


_METHODS = {
    Level.PANIC: "critical",
    Level.FATAL: "critical",
    Level.ERROR: "error",
    Level.WARN: "warning",
    Level.INFO: "info",
    Level.DEBUG: "debug",
    Level.TRACE: "debug",
}


class StructlogHook:
    """Structured logging for fired entries"""

    def __init__(
        self,
        logger: Any | None = None,
        levels: Iterable[Level | str | int] = ALL_LEVELS,
    ):
        """Initialize structlog hook.

        Args:
            logger: Optional structlog logger instance. If None, creates a new one.
            levels: Levels to forward; defaults to all of them
        """
        self.logger = logger or structlog.get_logger(__name__)
        self._name = "structlog_hook"
        self._levels = list(levels)

    @property
    def name(self) -> str:
        return self._name

    @property
    def levels(self) -> list[Level | str | int]:
        return self._levels

    def fire(self, entry: Any) -> None:
        """Log the entry at the matching structlog method.

        Entries without a ``level`` are logged at info; the entry's ``data``
        mapping, when present, is nested under the ``data`` key.
        """
        level = parse_level(getattr(entry, "level", Level.INFO))
        method = getattr(self.logger, _METHODS[level])

        log_data: dict[str, Any] = {"level_name": str(level)}
        timestamp = getattr(entry, "time", None)
        if timestamp is not None:
            log_data["entry_time"] = timestamp.isoformat()

        # Nested so user fields never collide with ``event`` or the keys above
        data = getattr(entry, "data", None)
        if data:
            log_data["data"] = dict(data)

        method(getattr(entry, "message", str(entry)), **log_data)
