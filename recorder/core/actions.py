"""
Canonical action model.

Any action that should survive a recording is converted to a StandardAction:
a type tag, an optional JSON-compatible payload and a flag telling the decoder
whether the original typed action has to be rebuilt from the type registry.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .canonical import canonicalize
from .errors import MalformedActionError

TYPE_KEY = "type"
PAYLOAD_KEY = "payload"
IS_TYPED_ACTION_KEY = "isTypedAction"

# Written in place of an absent payload so the key is always present on disk.
NULL_PAYLOAD = "ReSwift_Null"


@dataclass(frozen=True)
class StandardAction:
    """
    Type-erased, serializable action.

    Fields:
        type: Tag identifying a plain action or a registered typed action
        payload: JSON-compatible mapping, or None when the action carries no data
        is_typed_action: True if decoding must go through the type registry

    Compared by value but not hashable, since payload is a dict.
    """
    type: str
    payload: Optional[Dict[str, Any]] = None
    is_typed_action: bool = False

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> Dict[str, Any]:
        """
        Encode to the mapping stored in the action log.

        An absent payload is written as NULL_PAYLOAD.
        """
        payload: Any = canonicalize(dict(self.payload)) if self.payload is not None else NULL_PAYLOAD
        return {
            TYPE_KEY: self.type,
            PAYLOAD_KEY: payload,
            IS_TYPED_ACTION_KEY: self.is_typed_action,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StandardAction":
        """
        Decode from a stored mapping.

        Raises:
            MalformedActionError: If type or isTypedAction is missing or mistyped
        """
        if not isinstance(data, Mapping):
            raise MalformedActionError(f"action must be a mapping, got {type(data).__name__}")

        action_type = data.get(TYPE_KEY)
        is_typed_action = data.get(IS_TYPED_ACTION_KEY)
        if not isinstance(action_type, str):
            raise MalformedActionError(f"action has no string '{TYPE_KEY}': {data!r}")
        if not isinstance(is_typed_action, bool):
            raise MalformedActionError(f"action has no boolean '{IS_TYPED_ACTION_KEY}': {data!r}")

        payload = data.get(PAYLOAD_KEY)
        return cls(
            type=action_type,
            payload=dict(payload) if isinstance(payload, Mapping) else None,
            is_typed_action=is_typed_action,
        )


class StandardActionConvertible(ABC):
    """
    Capability of a typed action that can be recorded and rebuilt.

    Example:
        @dataclass(frozen=True)
        class SetUser(StandardActionConvertible):
            name: str

            def to_standard_action(self):
                return StandardAction("SetUser", {"name": self.name}, is_typed_action=True)

            @classmethod
            def from_standard_action(cls, action):
                return cls(name=action.payload["name"])

    The type tag of the produced StandardAction is the key the class must be
    registered under in the TypeRegistry.
    """

    @abstractmethod
    def to_standard_action(self) -> StandardAction:
        ...

    @classmethod
    @abstractmethod
    def from_standard_action(cls, action: StandardAction) -> "StandardActionConvertible":
        ...


def to_standard_action(action: Any) -> Optional[StandardAction]:
    """
    Convert an action to its canonical form.

    Returns:
        The StandardAction, or None if the action cannot be recorded
    """
    if isinstance(action, StandardAction):
        return action
    if isinstance(action, StandardActionConvertible):
        return action.to_standard_action()
    return None
