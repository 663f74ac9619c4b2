"""
Recording storage.

This module provides:
- RecordedEntry: Timestamped canonical action
- ActionLog: Abstract interface for recording persistence
- FileActionLog: Whole-log JSON file storage with atomic replace
- MemoryActionLog: Volatile storage for offline replays and tests
"""

from .entry import RecordedEntry
from .action_log import ActionLog
from .file_log import DEFAULT_FILENAME, FileActionLog
from .memory_log import MemoryActionLog

__all__ = [
    "RecordedEntry",
    "ActionLog",
    "FileActionLog",
    "MemoryActionLog",
    "DEFAULT_FILENAME",
]
