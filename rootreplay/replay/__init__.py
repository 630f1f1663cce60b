"""
Replay system for board state reconstruction.

Replay formats each raw action and folds the reducer over the result.
Must be 100% deterministic: same game log -> same snapshots.
"""

from .runner import ReplayStep, flatten_turns, initialize, replay

__all__ = [
    "ReplayStep",
    "flatten_turns",
    "initialize",
    "replay",
]
