"""
Recording and time-travel replay.

Replay re-dispatches recorded actions through the same reducer, so the same
action prefix always rebuilds the same state.
"""

from .history import RecordingHistory
from .runner import ReplayResult, replay_to_state
from .recording_store import RecordingStore

__all__ = [
    "RecordingHistory",
    "ReplayResult",
    "replay_to_state",
    "RecordingStore",
]
