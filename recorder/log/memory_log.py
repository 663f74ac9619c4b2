"""
In-memory action log.

Holds the last written log in process memory. Used for offline replays that
must not touch the recording on disk, and in tests.
"""

from typing import Dict, List, Optional, Sequence

from .action_log import ActionLog
from .entry import RecordedEntry


class MemoryActionLog(ActionLog):
    """
    Volatile action log.

    Args:
        recordings: Named recordings available to load()
    """

    def __init__(self, recordings: Optional[Dict[str, Sequence[RecordedEntry]]] = None) -> None:
        self.entries: List[RecordedEntry] = []
        self.writes = 0
        self.recordings = {name: list(entries) for name, entries in (recordings or {}).items()}

    def write(self, entries: Sequence[RecordedEntry]) -> None:
        self.entries = list(entries)
        self.writes += 1

    def load(self, identifier: Optional[str] = None) -> List[RecordedEntry]:
        if identifier is None:
            return list(self.entries)
        return list(self.recordings.get(identifier, []))
