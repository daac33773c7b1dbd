"""In-memory hook that records every entry it is fired with."""

import threading
from collections.abc import Iterable
from typing import Any

from ..levels import ALL_LEVELS, Level


class RecordingHook:
    """Captures fired entries so tests can assert on what was logged"""

    def __init__(
        self,
        levels: Iterable[Level | str | int] = ALL_LEVELS,
        name: str = "recording_hook",
    ):
        self._levels = list(levels)
        self._name = name
        self._entries: list[Any] = []
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def levels(self) -> list[Level | str | int]:
        return self._levels

    def fire(self, entry: Any) -> None:
        with self._lock:
            self._entries.append(entry)

    @property
    def entries(self) -> list[Any]:
        """Copy of all recorded entries, oldest first"""
        with self._lock:
            return list(self._entries)

    @property
    def last_entry(self) -> Any | None:
        with self._lock:
            return self._entries[-1] if self._entries else None

    def reset(self) -> None:
        with self._lock:
            self._entries.clear()
