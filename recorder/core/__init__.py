"""
Core recording primitives.

This module provides:
- StandardAction: Type-erased, serializable action
- StandardActionConvertible: Capability of typed actions to be recorded
- TypeRegistry: Decoders rebuilding typed actions from their canonical form
- Store: Reducer-driven state container
- Canonical: Deterministic JSON serialization
- Clock: Timestamps relative to the reference epoch
"""

from .actions import NULL_PAYLOAD, StandardAction, StandardActionConvertible, to_standard_action
from .registry import TypeRegistry
from .store import INIT_ACTION, Store
from .canonical import canonicalize, canonical_json_str, state_hash
from .clock import REFERENCE_EPOCH, SteppingClock, SystemClock
from .errors import (
    RecorderError,
    MalformedActionError,
    UnregisteredActionTypeError,
    ActionLogError,
    ReplayError,
    DispatchError,
)

__all__ = [
    "NULL_PAYLOAD",
    "StandardAction",
    "StandardActionConvertible",
    "to_standard_action",
    "TypeRegistry",
    "INIT_ACTION",
    "Store",
    "canonicalize",
    "canonical_json_str",
    "state_hash",
    "REFERENCE_EPOCH",
    "SteppingClock",
    "SystemClock",
    "RecorderError",
    "MalformedActionError",
    "UnregisteredActionTypeError",
    "ActionLogError",
    "ReplayError",
    "DispatchError",
]
