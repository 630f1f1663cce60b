"""
Reducer handlers for board replay.

All handlers are pure functions of (draft, delta): they mutate only the
plain-dict draft the reducer hands them. Counts other than scores are never
clamped, so an inconsistent log shows up as negative counts instead of being
hidden.
"""

from typing import Any, Dict, Optional

from .core.actions import CraftEvent, Location, Movement, PieceKind, ScoreDelta
from .core.errors import LayoutMismatchError, RegionIndexError
from .core.reducer import CRAFT, SCORE, Reducer

Draft = Dict[str, Any]


def register_handlers(reducer: Reducer) -> None:
    reducer.register(SCORE, on_score_delta)
    reducer.register(CRAFT, on_craft_event)
    reducer.register(PieceKind.BUILDING, on_building_moved)
    reducer.register(PieceKind.TOKEN, on_token_moved)
    reducer.register(PieceKind.PAWN, on_pawn_moved)
    reducer.register(PieceKind.WARRIOR, on_warrior_moved)


def default_reducer() -> Reducer:
    reducer = Reducer()
    register_handlers(reducer)
    return reducer


def _region(draft: Draft, index: int) -> Dict[str, Any]:
    regions = draft["regions"]
    if index < 0 or index >= len(regions):
        raise RegionIndexError(f"Region {index} outside board (0..{len(regions) - 1})")
    return regions[index]


def _sub_area(draft: Draft, key: str) -> Dict[str, Any]:
    if key not in draft["sub_areas"]:
        raise LayoutMismatchError(f"Unknown sub-area: {key}")
    return draft["sub_areas"][key]


def _tracked(draft: Draft, location: Optional[Location], sub_area: Optional[str]) -> Optional[Dict[str, Any]]:
    """Region or sub-area at a location, None for supply and faction boards."""
    if sub_area:
        return _sub_area(draft, sub_area)
    if isinstance(location, int):
        return _region(draft, location)
    return None


def _adjust(counts: Dict[str, int], key: str, amount: int) -> None:
    counts[key] = counts.get(key, 0) + amount


def on_score_delta(draft: Draft, delta: ScoreDelta) -> None:
    scores = draft["faction_scores"]
    scores[delta.faction] = max(0, scores.get(delta.faction, 0) + delta.amount)


def on_craft_event(draft: Draft, event: CraftEvent) -> None:
    _adjust(draft["crafted_counts"], event.item_key, 1)


def _move_counted(draft: Draft, move: Movement, field: str) -> None:
    key = move.formatted_piece

    source = _tracked(draft, move.source, move.source_sub_area)
    if source is not None:
        _adjust(source[field], key, -move.quantity)

    destination = _tracked(draft, move.destination, move.destination_sub_area)
    if destination is not None:
        _adjust(destination[field], key, move.quantity)


def on_building_moved(draft: Draft, move: Movement) -> None:
    _move_counted(draft, move, "buildings")


def on_token_moved(draft: Draft, move: Movement) -> None:
    _move_counted(draft, move, "tokens")


def on_pawn_moved(draft: Draft, move: Movement) -> None:
    # A pawn is a singleton: picking it up clears every location first.
    for region in draft["regions"]:
        region["warriors"][move.faction] = 0
    for sub_area in draft["sub_areas"].values():
        sub_area["warriors"][move.faction] = 0

    if move.destination_sub_area:
        _sub_area(draft, move.destination_sub_area)["warriors"][move.faction] = move.quantity
    elif isinstance(move.destination, int):
        _adjust(_region(draft, move.destination)["warriors"], move.faction, move.quantity)


def on_warrior_moved(draft: Draft, move: Movement) -> None:
    if move.source_sub_area is None and isinstance(move.source, int):
        _adjust(_region(draft, move.source)["warriors"], move.faction, -move.quantity)

    if move.destination_sub_area:
        # Forest occupancy is a single count, overwritten on entry.
        _sub_area(draft, move.destination_sub_area)["warriors"][move.faction] = move.quantity
    elif isinstance(move.destination, int):
        _adjust(_region(draft, move.destination)["warriors"], move.faction, move.quantity)
