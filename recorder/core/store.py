"""
Store: single state reduced from dispatched actions.

The reducer must be:
- Pure (no side effects, no I/O)
- Deterministic (same state and action -> same state)
- Non-dispatching (a reducer never dispatches another action)
"""

from typing import Any, Callable, List, Optional

from .actions import StandardAction
from .errors import DispatchError

# Reducer signature: (current_state, action) -> new_state
Reducer = Callable[[Any, Any], Any]
Subscriber = Callable[[Any], None]

# Dispatched to the reducer with state None when no initial state is given.
INIT_ACTION = StandardAction(type="@@recorder/INIT")


class Store:
    """
    Minimal reducer-driven state container.

    Usage:
        store = Store(counter_reducer)
        store.subscribe(lambda state: print(state))
        store.dispatch(StandardAction("INCREMENT"))
    """

    def __init__(self, reducer: Reducer, state: Any = None) -> None:
        self._reducer = reducer
        self._subscribers: List[Subscriber] = []
        self._is_dispatching = False

        if state is None:
            state = self._reduce(None, INIT_ACTION)
        self._state = state

    @property
    def state(self) -> Any:
        return self._state

    def dispatch(self, action: Any) -> Any:
        """
        Reduce action into state and notify subscribers.

        Raises:
            DispatchError: If called from inside the reducer
        """
        self.apply(action)
        self.notify()
        return action

    def apply(self, action: Any) -> Any:
        """Reduce action into state without notifying subscribers."""
        self._state = self._reduce(self._state, action)
        return self._state

    def replace_state(self, state: Any) -> None:
        """Set state without reducing (used by rewind) and notify subscribers."""
        self._state = state
        self.notify()

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """
        Register callback invoked with the new state after every change.

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    def _reduce(self, state: Optional[Any], action: Any) -> Any:
        if self._is_dispatching:
            raise DispatchError("Reducers may not dispatch actions")
        self._is_dispatching = True
        try:
            return self._reducer(state, action)
        finally:
            self._is_dispatching = False

    def notify(self) -> None:
        """Call every subscriber with the current state."""
        for subscriber in list(self._subscribers):
            subscriber(self._state)
