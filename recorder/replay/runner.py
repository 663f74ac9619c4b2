"""
Replay runner: move a store to a recorded step.

Cached steps are restored directly. Steps beyond the cache are rebuilt by
re-dispatching the action prefix from the initial state.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from ..core.errors import ReplayError
from ..core.store import Store
from .history import RecordingHistory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: State at the target step
        applied: Number of actions re-dispatched
        cache_hit: True if the state came from the snapshot cache
    """
    state: Any
    applied: int
    cache_hit: bool


def replay_to_state(
    history: RecordingHistory,
    store: Store,
    actions: Sequence[Any],
    target: int,
    dispatch_recorded: Callable[[Any], None],
) -> ReplayResult:
    """
    Move store to the state after the first target actions.

    Beyond the cache, replay restarts from history.initial_state, clears the
    recorded log (dispatch_recorded rebuilds it) and keeps history.action_count
    equal to the number of replay dispatches still pending. Snapshots are only
    appended for steps not yet cached, so the cache ends with target + 1
    states and is never truncated.

    Args:
        history: Recording history to read and extend
        store: Store whose state is moved
        actions: Action sequence to replay from
        target: Step to move to (0 = initial state)
        dispatch_recorded: Reduces and records one action regardless of
            history.action_count

    Returns:
        ReplayResult with the state at target

    Raises:
        ReplayError: If target is negative or needs actions not in actions
    """
    if target < 0:
        raise ReplayError(f"Cannot rewind to negative step {target}")

    if target <= history.cached_steps:
        state = history.computed_states[target]
        store.replace_state(state)
        return ReplayResult(state=state, applied=0, cache_hit=True)

    if target > len(actions):
        raise ReplayError(f"Cannot replay to step {target}: only {len(actions)} actions available")

    logger.info("Rewind to %d...", target)
    store.replace_state(history.initial_state)
    history.recorded.clear()
    history.action_count = target

    try:
        for i in range(target):
            dispatch_recorded(actions[i])
            history.action_count -= 1
            if i + 1 > history.cached_steps:
                history.computed_states.append(store.state)
    finally:
        # a failing reducer must not leave the store ignoring live dispatches
        history.action_count = 0

    return ReplayResult(state=store.state, applied=target, cache_hit=False)
