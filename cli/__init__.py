"""
rootreplay CLI - Root game log replay

Commands:
- rootreplay replay - Replay a parsed game log and show final/at-action state
- rootreplay log actions/region - Inspect normalized actions and regions
- rootreplay version
"""

__version__ = "0.1.0"
