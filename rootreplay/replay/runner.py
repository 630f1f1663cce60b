"""
Replay runner: fold a game log into one snapshot per action.

Replay is pure: the same game log always yields the same snapshot sequence.
"""

from dataclasses import dataclass, replace
from typing import List, Optional

from .. import reference
from ..core.actions import NormalizedAction
from ..core.raw import GameLog
from ..core.reducer import Reducer
from ..core.state import BoardSnapshot
from ..formatter import format_action
from ..handlers import default_reducer
from ..logging_config import get_logger


@dataclass(frozen=True)
class ReplayStep:
    """
    One replayed action.

    Fields:
        action: Normalized action
        state: Board snapshot immediately after the action
    """
    action: NormalizedAction
    state: BoardSnapshot


def initialize(game: GameLog) -> BoardSnapshot:
    """
    Zero state for a game, sized to its board layout.

    Raises:
        LayoutMismatchError: If the board layout is unknown
    """
    return BoardSnapshot.initial(
        factions=game.players.keys(),
        region_count=reference.region_count(game.map),
        sub_area_keys=reference.forests(game.map).keys(),
    )


def flatten_turns(game: GameLog) -> List[NormalizedAction]:
    """
    Format every action of every turn, in order.

    The first action of each turn carries turn_boundary = the turn's taker.
    """
    actions: List[NormalizedAction] = []
    for turn in game.turns:
        for i, raw in enumerate(turn.actions):
            act = format_action(raw, turn.taker)
            if i == 0:
                act = replace(act, turn_boundary=turn.taker)
            actions.append(act)
    return actions


def replay(game: Optional[GameLog], reducer: Optional[Reducer] = None) -> List[ReplayStep]:
    """
    Replay a game log.

    Args:
        game: Parsed game log (None or no turns yields an empty list)
        reducer: Reducer to use (default: all board handlers registered)

    Returns:
        One ReplayStep per action, in log order

    Raises:
        LayoutMismatchError: If the log references regions or sub-areas
            that the board layout does not have
    """
    if game is None or not game.turns:
        return []

    log = get_logger(__name__, trace_id=game.id)
    reducer = reducer or default_reducer()

    actions = flatten_turns(game)
    log.info("Replaying %d actions over %d turns on %s", len(actions), len(game.turns), game.map)

    state = initialize(game)
    steps: List[ReplayStep] = []
    for act in actions:
        state = reducer.apply(state, act)
        steps.append(ReplayStep(action=act, state=state))

    log.info("Replay finished with %d snapshots", len(steps))
    return steps
