"""
Recorded entry: one timestamped canonical action in the action log.
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..core.actions import StandardAction

TIMESTAMP_KEY = "timestamp"
ACTION_KEY = "action"


@dataclass(frozen=True)
class RecordedEntry:
    """
    Immutable log record.

    Fields:
        timestamp: Seconds since the reference epoch when the action was recorded
        action: Canonical form of the dispatched action
    """
    timestamp: float
    action: StandardAction

    def to_dict(self) -> Dict[str, Any]:
        return {
            TIMESTAMP_KEY: self.timestamp,
            ACTION_KEY: self.action.to_dict(),
        }
