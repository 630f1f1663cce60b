"""
Canonical serialization for snapshots and actions.

All comparisons and hashes of replay output go through these functions so
the same replay always yields identical bytes.
"""

import dataclasses
import hashlib
import json
from enum import Enum
from typing import Any, Dict

from .state import BoardSnapshot


def canonicalize(obj: Any) -> Any:
    """
    Convert nested dataclasses/dicts/lists to canonical plain data.

    Rules:
    - dataclasses become dicts of their fields
    - enums become their values
    - dict keys are stringified and sorted
    - tuples become lists
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: canonicalize(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {str(k): canonicalize(obj[k]) for k in sorted(obj.keys(), key=str)}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_str(obj: Any) -> str:
    """Deterministic compact JSON string."""
    return json.dumps(canonicalize(obj), sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def snapshot_to_dict(snapshot: BoardSnapshot) -> Dict[str, Any]:
    return canonicalize(snapshot)


def state_hash(snapshot: BoardSnapshot) -> str:
    """
    SHA-256 of the snapshot's canonical JSON.

    Returns:
        Hex string (64 characters)
    """
    return hashlib.sha256(canonical_json_str(snapshot).encode("utf-8")).hexdigest()
