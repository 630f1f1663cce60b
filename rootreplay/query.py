"""
Read-only query helpers over replay output.
"""

from typing import List, Optional, Sequence, Tuple

from .core.errors import RegionIndexError
from .core.raw import GameLog
from .core.state import BoardSnapshot, RegionState
from .reference import ALL_ITEMS
from .replay.runner import ReplayStep


def current_turn(step: ReplayStep) -> str:
    return step.action.acting_party


def is_active_turn(step: ReplayStep, faction: str) -> bool:
    return step.action.acting_party == faction


def faction_score(snapshot: Optional[BoardSnapshot], faction: str) -> int:
    if snapshot is None:
        return 0
    return snapshot.faction_scores.get(faction, 0)


def region(snapshot: BoardSnapshot, index: int) -> RegionState:
    if index < 0 or index >= len(snapshot.regions):
        raise RegionIndexError(f"Region {index} outside board (0..{len(snapshot.regions) - 1})")
    return snapshot.regions[index]


def has_warriors(area: RegionState) -> bool:
    return any(n > 0 for n in area.warriors.values())


def has_buildings(area: RegionState) -> bool:
    return any(n > 0 for n in area.buildings.values())


def has_tokens(area: RegionState) -> bool:
    return any(n > 0 for n in area.tokens.values())


def _expand(counts) -> List[str]:
    pieces: List[str] = []
    for key, n in counts.items():
        pieces.extend([key] * max(n, 0))
    return pieces


def expand_buildings(area: RegionState) -> List[str]:
    """One entry per physical building, e.g. ["c_s", "c_s", "c_w"]."""
    return _expand(area.buildings)


def expand_tokens(area: RegionState) -> List[str]:
    """One entry per physical token."""
    return _expand(area.tokens)


def next_turn_index(steps: Sequence[ReplayStep], current: int) -> int:
    """
    Index of the next turn-boundary action after current.

    Falls back to the last action when there is no later turn.
    """
    for i in range(current + 1, len(steps)):
        if steps[i].action.turn_boundary:
            return i
    return max(len(steps) - 1, 0)


def prev_turn_index(steps: Sequence[ReplayStep], current: int) -> int:
    """
    Index of the closest turn-boundary action before current.

    Falls back to the first action when there is none.
    """
    for i in range(min(current, len(steps)) - 1, -1, -1):
        if steps[i].action.turn_boundary:
            return i
    return 0


def player_order(game: GameLog) -> List[Tuple[str, str]]:
    """
    (faction, player name) pairs in seating order.

    The first round is setup, so order comes from the takers of the second
    round of turns. Factions that never appear there sort first, keeping
    their order in game.players.
    """
    num_players = len(game.players)
    second_round = [t.taker for t in game.turns[num_players:num_players * 2]]

    def position(faction: str) -> int:
        return second_round.index(faction) if faction in second_round else -1

    return [(f, game.players[f]) for f in sorted(game.players, key=position)]


def item_supply(snapshot: BoardSnapshot) -> List[Tuple[str, bool]]:
    """
    Every slot of the shared item supply with whether it has been crafted.

    A slot (item, crafted_if) counts as crafted once the item has been
    crafted more than crafted_if times.
    """
    return [(item, snapshot.crafted_counts.get(item, 0) > crafted_if) for item, crafted_if in ALL_ITEMS]
