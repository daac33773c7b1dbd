"""Exceptions raised by levelhooks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from .failures import HookFailures


class LevelHooksError(Exception):
    """Base exception for all levelhooks errors."""

    pass


class InvalidLevelError(LevelHooksError, ValueError):
    """Raised when a value cannot be interpreted as a log level."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid log level: {value!r}")


class HookFailuresError(LevelHooksError):
    """Raised by callers that choose to escalate a failure report."""

    def __init__(self, failures: HookFailures):
        self.failures = failures
        names = ", ".join(failure.hook_name for failure in failures)
        super().__init__(f"{len(failures)} hook(s) failed to fire: {names}")


class ConfigurationError(LevelHooksError):
    """Raised when settings loading or validation fails."""

    pass
