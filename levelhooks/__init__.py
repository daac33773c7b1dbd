"""Level-keyed hook dispatch for structured logging.

Key components:
- Level: Enumeration of log severities used as dispatch keys
- Hook: Protocol for hook implementations
- HookRegistry: Registry mapping levels to hooks
- HookDispatcher: Fires hooks with per-hook fault isolation
- HookFailure / HookFailures: Failure report returned by the dispatcher
"""

from .base import FunctionHook, Hook, hook
from .config import HookSettings, LoggingSettings, load_settings
from .dispatcher import HookDispatcher
from .entry import Entry
from .exceptions import (
    ConfigurationError,
    HookFailuresError,
    InvalidLevelError,
    LevelHooksError,
)
from .failures import HookFailure, HookFailures
from .levels import ALL_LEVELS, Level, parse_level
from .registry import HookRegistry


__all__ = [
    "ALL_LEVELS",
    "ConfigurationError",
    "Entry",
    "FunctionHook",
    "Hook",
    "HookDispatcher",
    "HookFailure",
    "HookFailures",
    "HookFailuresError",
    "HookRegistry",
    "HookSettings",
    "InvalidLevelError",
    "Level",
    "LevelHooksError",
    "LoggingSettings",
    "hook",
    "load_settings",
    "parse_level",
]
