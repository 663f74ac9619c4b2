"""
Recording history owned by a RecordingStore.
"""

from dataclasses import dataclass, field
from typing import Any, List

from ..log.entry import RecordedEntry


@dataclass
class RecordingHistory:
    """
    Mutable history of one recording session.

    Fields:
        initial_state: State before any recorded action
        actions: Recorded actions in dispatch order
        computed_states: Snapshot cache; index 0 is initial_state, index i is
            the state after actions[i - 1]
        recorded: Timestamped canonical entries persisted to the action log
        action_count: Replay dispatches still pending (0 = live)
    """
    initial_state: Any
    actions: List[Any] = field(default_factory=list)
    computed_states: List[Any] = field(default_factory=list)
    recorded: List[RecordedEntry] = field(default_factory=list)
    action_count: int = 0

    def __post_init__(self) -> None:
        if not self.computed_states:
            self.computed_states.append(self.initial_state)

    @property
    def replaying(self) -> bool:
        return self.action_count > 0

    @property
    def cached_steps(self) -> int:
        """Highest step with a cached snapshot."""
        return len(self.computed_states) - 1
