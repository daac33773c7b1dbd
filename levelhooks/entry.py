"""Plain record type for a single log event.

The dispatcher treats entries as opaque and never reads or mutates them. This
record exists for logger cores and tests that do not bring their own type.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Any

from .levels import Level


@dataclass
class Entry:
    """One log event: message, severity, timestamp and structured fields."""

    message: str
    level: Level = Level.INFO
    time: datetime = field(default_factory=lambda: datetime.now(UTC))
    data: dict[str, Any] = field(default_factory=dict)

    def with_fields(self, **fields: Any) -> Entry:
        """Return a copy of the entry with ``fields`` merged into ``data``."""
        return replace(self, data={**self.data, **fields})
