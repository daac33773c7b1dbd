"""Hook protocol and helpers for hook implementors."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, Protocol, runtime_checkable

from .levels import Level


__all__ = ["FunctionHook", "Hook", "hook", "hook_name"]


@runtime_checkable
class Hook(Protocol):
    """Protocol for observers of log entries.

    ``fire`` signals failure by raising an exception or by returning an
    exception instance. Any other return value counts as success.
    """

    @property
    def name(self) -> str:
        """Hook name for failure reports and logs"""
        ...

    @property
    def levels(self) -> Sequence[Any]:
        """Levels this hook wants to be fired for"""
        ...

    def fire(self, entry: Any) -> BaseException | None:
        """Handle one log entry."""
        ...


def hook_name(hook: Any) -> str:
    """Best-effort display name for a hook."""
    name = getattr(hook, "name", None)
    if isinstance(name, str) and name:
        return name
    return type(hook).__name__


class FunctionHook:
    """Adapts a plain callable ``func(entry)`` to the :class:`Hook` protocol."""

    def __init__(
        self,
        func: Callable[[Any], Any],
        levels: Iterable[Level | str | int],
        name: str | None = None,
    ):
        self._func = func
        self._levels = list(levels)
        self._name = name or getattr(func, "__qualname__", repr(func))

    @property
    def name(self) -> str:
        return self._name

    @property
    def levels(self) -> list[Level | str | int]:
        return self._levels

    def fire(self, entry: Any) -> BaseException | None:
        result = self._func(entry)
        if isinstance(result, BaseException):
            return result
        return None

    def __repr__(self) -> str:
        return f"FunctionHook({self._name!r}, levels={self._levels!r})"


def hook(
    *levels: Level | str | int, name: str | None = None
) -> Callable[[Callable[[Any], Any]], FunctionHook]:
    """Decorator turning a function into a :class:`FunctionHook`.

    Example:
        @hook(Level.WARN, Level.ERROR)
        def page_oncall(entry): ...

        registry.add(page_oncall)
    """

    def decorator(func: Callable[[Any], Any]) -> FunctionHook:
        return FunctionHook(func, levels, name=name)

    return decorator
