"""
RecordingStore: records every dispatched action and rewinds on demand.

Wraps a Store by composition. Live dispatches are reduced, cached and written
to the action log; while a replay is running, dispatches from outside the
replay are ignored so they cannot interleave with the re-executed actions.
"""

import json
from typing import Any, Callable, List, Optional, Sequence

from ..config import default_action_log
from ..core.actions import to_standard_action
from ..core.errors import ActionLogError
from ..core.registry import TypeMap, TypeRegistry
from ..core.store import Reducer, Store, Subscriber
from ..core.clock import SystemClock
from ..log.action_log import ActionLog
from ..log.entry import RecordedEntry
from ..logging_config import get_logger
from .history import RecordingHistory
from .runner import ReplayResult, replay_to_state


class RecordingStore:
    """
    Store that records dispatched actions and supports time travel.

    Usage:
        store = RecordingStore(reducer, type_maps=[{"SetUser": SetUser}])
        store.dispatch(SetUser(name="ada"))
        store.rewind(0)

        # later, in a fresh process
        store = RecordingStore(reducer, type_maps=[{"SetUser": SetUser}],
                               recording="recording.json")
    """

    def __init__(
        self,
        reducer: Reducer,
        state: Any = None,
        type_maps: Sequence[TypeMap] = (),
        recording: Optional[str] = None,
        action_log: Optional[ActionLog] = None,
        clock: Any = None,
    ) -> None:
        """
        Initialize recording store.

        Args:
            reducer: Pure function (state, action) -> state
            state: Initial state (None = reducer's initial state)
            type_maps: Mappings of type tag -> decoder, merged in order
            recording: Recording to load and replay before returning
            action_log: Where recorded actions are written (default from env)
            clock: Timestamp source with now() (default SystemClock)

        Raises:
            UnregisteredActionTypeError: If the recording holds a typed action
                none of type_maps can decode
        """
        self._store = Store(reducer, state)
        self.registry = TypeRegistry(*type_maps)
        self.action_log = action_log if action_log is not None else default_action_log()
        self.clock = clock if clock is not None else SystemClock()
        self.history = RecordingHistory(initial_state=self._store.state)
        self.logger = get_logger(__name__, recording=recording)

        if recording is not None:
            self.history.actions = self.load_actions(recording)
            self.replay_to_state(self.history.actions, len(self.history.actions))

    @property
    def state(self) -> Any:
        return self._store.state

    @property
    def initial_state(self) -> Any:
        return self.history.initial_state

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        return self._store.subscribe(subscriber)

    def dispatch(self, action: Any) -> Any:
        """
        Dispatch action to the wrapped store and record it.

        Subscribers are notified only after the new state is cached and the
        action recorded, so an action they dispatch is recorded after this one.
        While a replay is running the action is returned unchanged without
        being reduced or recorded.
        """
        if self.history.replaying:
            self.logger.debug("Ignoring %r dispatched during replay", action)
            return action

        self._store.apply(action)
        self.history.computed_states.append(self._store.state)
        if self._record(action):
            self.history.actions.append(action)

        self._store.notify()
        return action

    def replay_to_state(self, actions: Sequence[Any], target: int) -> ReplayResult:
        """
        Move state to the step after the first target actions.

        Raises:
            ReplayError: If target cannot be reached with actions
        """
        return replay_to_state(self.history, self._store, actions, target, self._dispatch_recorded)

    def rewind(self, target: int) -> ReplayResult:
        """Move state to a step of this session's own history."""
        return self.replay_to_state(self.history.actions, target)

    def load_actions(self, recording: str) -> List[Any]:
        """
        Load a recording and decode its actions through the type registry.

        Raises:
            UnregisteredActionTypeError: If a typed action has no decoder
        """
        entries = self.action_log.load(recording)
        self.logger.info("Loaded %d recorded actions", len(entries))
        return [self.registry.decode(entry.action) for entry in entries]

    def _dispatch_recorded(self, action: Any) -> None:
        self._store.dispatch(action)
        self._record(action)

    def _record(self, action: Any) -> bool:
        """
        Append action to the recorded log and write the whole log.

        Returns:
            False if the action has no serializable canonical form
        """
        standard_action = to_standard_action(action)
        if standard_action is None:
            self._warn_not_recordable(
                action, "it is neither a StandardAction nor StandardActionConvertible"
            )
            return False

        # one unserializable entry would fail every later whole-log write
        try:
            json.dumps(standard_action.to_dict())
        except (TypeError, ValueError) as ex:
            self._warn_not_recordable(action, f"payload is not JSON-serializable ({ex})")
            return False

        self.history.recorded.append(
            RecordedEntry(timestamp=self.clock.now(), action=standard_action)
        )
        try:
            self.action_log.write(self.history.recorded)
        except ActionLogError as ex:
            self.logger.debug("Recording kept in memory only: %s", ex)
        return True

    def _warn_not_recordable(self, action: Any, reason: str) -> None:
        self.logger.warning("Could not record action %r: %s", action, reason)
