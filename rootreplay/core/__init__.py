"""
Core replay primitives.

This module provides the foundational abstractions for board replay:
- Raw*: Parsed game-log structures (one variant per action kind)
- NormalizedAction / Movement: Formatted actions with structured deltas
- BoardSnapshot / RegionState: Immutable board state
- Reducer: Registry of pure delta handlers
- Canonical: Deterministic serialization and hashing
"""

from .raw import (
    FactionBoard,
    Forest,
    GameLog,
    RawAction,
    RawClearPath,
    RawCombat,
    RawCraft,
    RawFlipPlot,
    RawGainVP,
    RawMove,
    RawReveal,
    RawSetOutcast,
    RawSetPrices,
    RawSwapPlots,
    RawThing,
    RawUnknown,
    RawUpdateFunds,
    Turn,
)
from .actions import CraftEvent, Movement, NormalizedAction, PieceKind, ScoreDelta
from .state import BoardSnapshot, RegionState
from .reducer import CRAFT, SCORE, Reducer
from .canonical import canonical_json_str, canonicalize, snapshot_to_dict, state_hash
from .errors import (
    GameLogError,
    InvalidTransitionError,
    LayoutMismatchError,
    RegionIndexError,
    ReplayError,
)

__all__ = [
    "FactionBoard",
    "Forest",
    "GameLog",
    "RawAction",
    "RawClearPath",
    "RawCombat",
    "RawCraft",
    "RawFlipPlot",
    "RawGainVP",
    "RawMove",
    "RawReveal",
    "RawSetOutcast",
    "RawSetPrices",
    "RawSwapPlots",
    "RawThing",
    "RawUnknown",
    "RawUpdateFunds",
    "Turn",
    "CraftEvent",
    "Movement",
    "NormalizedAction",
    "PieceKind",
    "ScoreDelta",
    "BoardSnapshot",
    "RegionState",
    "CRAFT",
    "SCORE",
    "Reducer",
    "canonical_json_str",
    "canonicalize",
    "snapshot_to_dict",
    "state_hash",
    "GameLogError",
    "InvalidTransitionError",
    "LayoutMismatchError",
    "RegionIndexError",
    "ReplayError",
]
