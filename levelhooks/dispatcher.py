"""Hook dispatch for levelhooks.

This module provides the HookDispatcher class which fans a log entry out to
every hook registered for its level. Each hook runs in isolation: a failing
hook never prevents the hooks after it from firing, and failures are returned
to the caller as data rather than raised.
"""

from typing import Any

import structlog

from .base import hook_name
from .config import HookSettings
from .failures import HookFailure, HookFailures
from .registry import HookRegistry


class HookDispatcher:
    """Fires hooks from a registry with per-hook fault isolation.

    Hooks run synchronously on the caller's thread, in registration order.
    A slow hook blocks the call; hooks that must not block are expected to
    hand work off on their own.
    """

    def __init__(
        self, registry: HookRegistry, settings: HookSettings | None = None
    ) -> None:
        """Initialize the dispatcher.

        Args:
            registry: The hook registry to read hooks from
            settings: Optional settings; defaults to ``HookSettings()``
        """
        self._registry = registry
        self._settings = settings or HookSettings()
        self._logger = structlog.get_logger(__name__)

    @property
    def registry(self) -> HookRegistry:
        return self._registry

    def fire(self, level: Any, entry: Any) -> HookFailures | None:
        """Fire every hook registered for ``level`` with ``entry``.

        Args:
            level: The level the entry was logged at
            entry: The log entry, passed unchanged to each hook

        Returns:
            The failures in invocation order, or None if no hook failed
            (including when no hook is registered for the level)
        """
        failures: HookFailures | None = None

        # Snapshot taken once; hooks registered while firing wait for the next call
        for hook in self._registry.get_hooks(level):
            try:
                error = hook.fire(entry)
            except Exception as e:
                error = e
            if not isinstance(error, BaseException):
                continue
            if failures is None:
                failures = HookFailures()
            failures.append(HookFailure(hook=hook, error=error))

        return failures

    def emit(self, level: Any, entry: Any) -> HookFailures | None:
        """Fire hooks for ``level`` and log each failure.

        Returns the same value as :meth:`fire`, leaving escalation to the
        caller.
        """
        failures = self.fire(level, entry)
        if failures and self._settings.log_failures:
            for failure in failures:
                self._logger.error(
                    "hook_fire_failed",
                    hook=hook_name(failure.hook),
                    hook_level=str(level),
                    error=str(failure.error),
                    error_type=type(failure.error).__name__,
                )
        return failures
