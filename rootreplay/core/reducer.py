"""
Reducer: pure board-state transitions.

The reducer is the heart of replay. It must be:
- Pure (no side effects, no I/O)
- Deterministic (same snapshot + action -> same next snapshot)
- Non-mutating (the input snapshot is never touched)
"""

from typing import Any, Callable, Dict

from .actions import NormalizedAction
from .errors import InvalidTransitionError
from .state import BoardSnapshot

SCORE = "score"
CRAFT = "craft"

# Handler signature: (draft, delta) -> None, mutating the plain-dict draft
Handler = Callable[[Dict[str, Any], Any], None]


class Reducer:
    """
    Registry of delta handlers.

    Handlers are keyed by delta kind: SCORE, CRAFT, or a PieceKind for
    movements.

    Usage:
        reducer = Reducer()
        reducer.register(SCORE, on_score_delta)
        reducer.register(PieceKind.WARRIOR, on_warrior_moved)
        next_snapshot = reducer.apply(snapshot, action)
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, Handler] = {}

    def register(self, kind: str, handler: Handler) -> None:
        """
        Register delta handler.

        Args:
            kind: SCORE, CRAFT or a PieceKind value
            handler: Function (draft, delta) -> None
        """
        self._handlers[kind] = handler

    def _handler(self, kind: str) -> Handler:
        if kind not in self._handlers:
            raise InvalidTransitionError(f"No handler for delta kind: {kind}")
        return self._handlers[kind]

    def apply(self, state: BoardSnapshot, action: NormalizedAction) -> BoardSnapshot:
        """
        Apply action to snapshot.

        The snapshot is copied to a draft, the score, craft and movement
        deltas are applied in that order (movements in list order), and the
        draft is frozen into a new snapshot.

        Args:
            state: Current snapshot
            action: Action to apply

        Returns:
            New snapshot

        Raises:
            InvalidTransitionError: If a delta or piece kind has no handler
        """
        draft = state.to_dict()

        if action.score_delta is not None:
            self._handler(SCORE)(draft, action.score_delta)

        if action.craft_event is not None:
            self._handler(CRAFT)(draft, action.craft_event)

        for move in action.movements:
            self._handler(move.piece_kind)(draft, move)

        return BoardSnapshot.from_dict(draft)
