"""
ActionLog abstract interface.

Defines contract for recording storage implementations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .entry import RecordedEntry


class ActionLog(ABC):
    """
    Abstract recording storage interface.

    All implementations must guarantee:
    - Whole-log writes (every write replaces the previous log entirely)
    - Entries read back in the order they were written
    - A partial write never corrupts the previously written log
    """

    @abstractmethod
    def write(self, entries: Sequence[RecordedEntry]) -> None:
        """
        Replace the stored log with entries.

        Raises:
            ActionLogError: If the log cannot be written
        """
        ...

    @abstractmethod
    def load(self, identifier: Optional[str] = None) -> List[RecordedEntry]:
        """
        Read a stored log.

        Args:
            identifier: Name of the recording to read (None = this log)

        Returns:
            Entries in log order; empty if the recording is missing or unreadable
        """
        ...
