"""Built-in hook implementations.

- RecordingHook: in-memory capture of fired entries, for tests
- StructlogHook: forwards entries to a structlog logger
"""

from .recording import RecordingHook
from .structlog_hook import StructlogHook


__all__ = ["RecordingHook", "StructlogHook"]
