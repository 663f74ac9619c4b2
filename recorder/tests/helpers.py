"""
Shared reducers and actions for the test suite.
"""

from dataclasses import dataclass

from recorder.core.actions import StandardAction, StandardActionConvertible

INCREMENT = StandardAction(type="INCREMENT")


@dataclass(frozen=True)
class Add(StandardActionConvertible):
    """Typed action adding amount to a counter."""
    amount: int

    def to_standard_action(self):
        return StandardAction(type="Add", payload={"amount": self.amount}, is_typed_action=True)

    @classmethod
    def from_standard_action(cls, action):
        return cls(amount=action.payload["amount"])


@dataclass(frozen=True)
class Reset:
    """Action with no canonical form."""


def counter_reducer(state, action):
    if state is None:
        return 0
    if isinstance(action, StandardAction) and action.type == "INCREMENT":
        return state + 1
    if isinstance(action, Add):
        return state + action.amount
    if isinstance(action, Reset):
        return 0
    return state


TYPE_MAP = {"Add": Add}
