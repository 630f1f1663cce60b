"""
Test suite for the replay engine.

Focus areas:
- Formatter shape handling
- Game-log decoding
- Reducer purity and per-piece semantics
- Replay determinism
"""
