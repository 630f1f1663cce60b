"""
Exception types for the replay engine.
"""


class ReplayError(Exception):
    """Base class for structural replay failures."""
    pass


class GameLogError(ReplayError):
    """Raised when a game log does not have the expected structure."""
    pass


class LayoutMismatchError(ReplayError):
    """Raised when the log references a board layout or sub-area that is not defined."""
    pass


class RegionIndexError(LayoutMismatchError, IndexError):
    """Raised when a movement references a region index outside the board layout."""
    pass


class InvalidTransitionError(ReplayError):
    """Raised when no handler is registered for a delta or piece kind."""
    pass
