"""Shared test fixtures and configuration for levelhooks tests.

Hook doubles defined here record the order they were fired in to a shared
call log so tests can assert on invocation order across hooks.
"""

from collections.abc import Callable, Generator
from typing import Any

import pytest
import structlog

from levelhooks import Entry, HookDispatcher, HookRegistry, HookSettings, Level


class CallLog(list[tuple[str, Any]]):
    """Ordered record of (hook name, entry) pairs."""

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self]


class RecordingTestHook:
    """Test hook that records every call and succeeds."""

    def __init__(
        self,
        name: str = "recording_test_hook",
        levels: list[Any] | None = None,
        call_log: CallLog | None = None,
    ):
        self._name = name
        self._levels = levels if levels is not None else [Level.INFO]
        self.call_log = call_log if call_log is not None else CallLog()
        self.call_count = 0
        self.last_entry: Any = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def levels(self) -> list[Any]:
        return self._levels

    def fire(self, entry: Any) -> None:
        self.call_count += 1
        self.last_entry = entry
        self.call_log.append((self._name, entry))


class FailingHook(RecordingTestHook):
    """Test hook that records the call and then raises."""

    def __init__(self, *args: Any, error: Exception | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.error = error or ValueError(f"Test error from {self.name}")

    def fire(self, entry: Any) -> None:
        super().fire(entry)
        raise self.error


class ReturningErrorHook(RecordingTestHook):
    """Test hook that reports failure by returning an exception."""

    def __init__(self, *args: Any, error: Exception | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.error = error or RuntimeError(f"Returned error from {self.name}")

    def fire(self, entry: Any) -> Exception:  # type: ignore[override]
        super().fire(entry)
        return self.error


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def hook_settings() -> HookSettings:
    """Settings independent of the test environment."""
    return HookSettings(unknown_levels="reject", log_failures=True)


@pytest.fixture
def hook_registry(hook_settings: HookSettings) -> HookRegistry:
    """Create a fresh hook registry for testing."""
    return HookRegistry(hook_settings)


@pytest.fixture
def hook_dispatcher(
    hook_registry: HookRegistry, hook_settings: HookSettings
) -> HookDispatcher:
    """Create a dispatcher bound to the test registry."""
    return HookDispatcher(hook_registry, hook_settings)


@pytest.fixture
def sample_entry() -> Entry:
    return Entry(message="disk usage high", level=Level.ERROR, data={"disk": "sda1"})


@pytest.fixture
def call_log() -> CallLog:
    return CallLog()


@pytest.fixture
def make_hook(call_log: CallLog) -> Callable[..., RecordingTestHook]:
    """Factory for succeeding hooks sharing the test call log."""

    def factory(name: str, levels: list[Any] | None = None) -> RecordingTestHook:
        return RecordingTestHook(name=name, levels=levels, call_log=call_log)

    return factory


@pytest.fixture
def make_failing_hook(call_log: CallLog) -> Callable[..., FailingHook]:
    """Factory for raising hooks sharing the test call log."""

    def factory(
        name: str, levels: list[Any] | None = None, error: Exception | None = None
    ) -> FailingHook:
        return FailingHook(name=name, levels=levels, call_log=call_log, error=error)

    return factory


@pytest.fixture
def make_returning_hook(call_log: CallLog) -> Callable[..., ReturningErrorHook]:
    """Factory for hooks that return their error instead of raising."""

    def factory(
        name: str, levels: list[Any] | None = None, error: Exception | None = None
    ) -> ReturningErrorHook:
        return ReturningErrorHook(
            name=name, levels=levels, call_log=call_log, error=error
        )

    return factory
