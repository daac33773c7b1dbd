"""Failure report types returned by the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .base import hook_name
from .exceptions import HookFailuresError


__all__ = ["HookFailure", "HookFailures"]


@dataclass(frozen=True)
class HookFailure:
    """One failed hook invocation."""

    hook: Any
    error: BaseException

    @property
    def hook_name(self) -> str:
        return hook_name(self.hook)

    def __str__(self) -> str:
        return f"{self.hook_name}: {self.error}"


class HookFailures(list[HookFailure]):
    """Failures from a single fire call, in invocation order.

    The dispatcher only ever returns a non-empty report; ``None`` means every
    hook succeeded.
    """

    @property
    def hooks(self) -> list[Any]:
        return [failure.hook for failure in self]

    @property
    def errors(self) -> list[BaseException]:
        return [failure.error for failure in self]

    def raise_for_failures(self) -> None:
        """Raise :class:`HookFailuresError` if the report holds any failure."""
        if self:
            raise HookFailuresError(self) from self[0].error

    def __str__(self) -> str:
        return "; ".join(str(failure) for failure in self)
