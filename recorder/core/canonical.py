"""
Canonical serialization for recorded actions and states.

Payloads written to the action log and states compared across replays go
through these functions so equal values always produce identical JSON.
"""

import hashlib
import json
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert arbitrary nested dict/list to canonical form.

    Rules:
    - dict keys sorted alphabetically
    - tuples converted to lists
    - recursive normalization
    """
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_str(obj: Any) -> str:
    """
    Deterministic compact JSON string.

    sort_keys and tight separators remove ordering and whitespace variance;
    ensure_ascii=False keeps non-ASCII text readable. Values JSON cannot
    encode (dataclasses, custom objects) are written as their repr.
    """
    canon = canonicalize(obj)
    return json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=repr)


def state_hash(state: Any) -> str:
    """
    SHA-256 of the canonical JSON of a state.

    Returns:
        Hex string (64 characters)
    """
    return hashlib.sha256(canonical_json_str(state).encode("utf-8")).hexdigest()
