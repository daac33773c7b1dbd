"""Registry mapping log levels to the hooks interested in them"""

import threading
from typing import Any

import structlog

from .base import Hook, hook_name
from .config import HookSettings
from .exceptions import InvalidLevelError
from .levels import Level, parse_level


class HookRegistry:
    """Registry of hooks keyed by level.

    Registration is append-only. Each ``add`` publishes a new level map of
    immutable tuples, so readers always see a consistent snapshot without
    taking the lock.
    """

    def __init__(self, settings: HookSettings | None = None) -> None:
        self._settings = settings or HookSettings()
        self._hooks: dict[Level, tuple[Hook, ...]] = {}
        self._lock = threading.Lock()
        self._logger = structlog.get_logger(__name__)

    def add(self, hook: Hook) -> None:
        """Register a hook under every level it declares.

        Levels are resolved before anything is appended. With the ``reject``
        policy an unknown level raises and the hook is registered nowhere;
        with ``ignore`` unknown levels are skipped. A level declared twice is
        appended twice.

        Raises:
            InvalidLevelError: If a declared level is unknown and the policy
                is ``reject``
        """
        name = hook_name(hook)
        levels: list[Level] = []
        for value in hook.levels:
            try:
                levels.append(parse_level(value))
            except InvalidLevelError:
                if self._settings.unknown_levels == "reject":
                    raise
                self._logger.warning(
                    "hook_level_ignored", hook=name, declared_level=value
                )

        with self._lock:
            hooks = dict(self._hooks)
            for level in levels:
                hooks[level] = (*hooks.get(level, ()), hook)
            self._hooks = hooks

        self._logger.debug(
            "hook_registered", hook=name, levels=[str(level) for level in levels]
        )

    def get_hooks(self, level: Any) -> tuple[Hook, ...]:
        """Get the hooks registered for a level, in registration order.

        Unknown levels have no hooks.
        """
        try:
            key = parse_level(level)
        except InvalidLevelError:
            return ()
        return self._hooks.get(key, ())

    def hook_count(self, level: Any) -> int:
        """Number of registrations for a level"""
        return len(self.get_hooks(level))

    def levels(self) -> list[Level]:
        """Levels that have at least one hook, most severe first"""
        return sorted(level for level, hooks in self._hooks.items() if hooks)

    def __len__(self) -> int:
        return sum(len(hooks) for hooks in self._hooks.values())

    def __repr__(self) -> str:
        return f"HookRegistry(registrations={len(self)})"
