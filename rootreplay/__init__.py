"""
Root Game Log Replay

Deterministic replay engine that folds a parsed Root game log into one
immutable board snapshot per action.
"""

__version__ = "0.1.0"
