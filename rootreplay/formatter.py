"""
Action formatter: raw action -> NormalizedAction.

Each raw action variant has one formatter function returning the fields it
contributes (description plus at most one kind of structured delta). The
formatter is pure apart from DEBUG logging of skipped things.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from . import reference
from .core.actions import CraftEvent, Location, Movement, NormalizedAction, PieceKind, ScoreDelta
from .core.canonical import canonical_json_str
from .core.raw import (
    FactionBoard,
    Forest,
    RawAction,
    RawClearPath,
    RawCombat,
    RawCraft,
    RawFlipPlot,
    RawGainVP,
    RawLocation,
    RawMove,
    RawReveal,
    RawSetOutcast,
    RawSetPrices,
    RawSwapPlots,
    RawThing,
    RawUpdateFunds,
)

logger = logging.getLogger(__name__)

CORVID = "P"
FACE_DOWN_PLOT = "t"
PLACEHOLDER_PREFIX = "[[action needs description]]"

Fields = Dict[str, Any]


def placeholder(raw: str) -> str:
    return f"{PLACEHOLDER_PREFIX} {raw or '[no raw]'}"


def _classify(loc: RawLocation) -> Tuple[bool, Optional[Location], Optional[str]]:
    """
    Resolve a raw location.

    Returns:
        (valid, region-or-board, sub_area_key); (True, None, None) is supply
    """
    if loc is None or loc == "":
        return True, None, None
    if isinstance(loc, FactionBoard):
        return True, loc, None
    if isinstance(loc, Forest):
        return bool(loc.clearings), None, loc.key or None
    if isinstance(loc, bool):
        return False, None, None
    if isinstance(loc, int):
        return True, loc, None
    if isinstance(loc, str):
        # Numeric strings count as clearings; only non-numeric tokens are malformed
        try:
            return True, int(loc.strip()), None
        except ValueError:
            return False, None, None
    return False, None, None


def _describe_location(location: Optional[Location], sub_area: Optional[str]) -> str:
    if sub_area:
        return f"forest {sub_area}"
    if isinstance(location, FactionBoard):
        return f"board {reference.faction_name(location.faction)}"
    if location is None:
        return "supply"
    return f"clearing {location}"


def _describe_pieces(thing: RawThing, kind: PieceKind) -> str:
    name = reference.faction_name(thing.faction)
    if kind == PieceKind.WARRIOR:
        return f"{thing.number} {name} warrior(s)"
    if kind == PieceKind.PAWN:
        return f"{thing.number} {name} pawn(s)"
    return f"{thing.number} {name} {reference.building_token_name(thing.faction, thing.piece or '')}"


def _format_thing(thing: RawThing) -> Optional[Tuple[Movement, str]]:
    if not thing.faction or not thing.piece_type:
        logger.debug("Skipping thing without faction or piece type: %r", thing)
        return None
    if thing.number is None:
        logger.debug("Skipping thing with unreadable count: %r", thing)
        return None
    try:
        kind = PieceKind(thing.piece_type)
    except ValueError:
        logger.debug("Skipping thing with unknown piece type: %r", thing)
        return None
    if kind == PieceKind.RAFT:
        return None

    ok_start, source, source_sub_area = _classify(thing.start)
    ok_dest, destination, destination_sub_area = _classify(thing.destination)
    if not ok_start or not ok_dest:
        logger.debug("Skipping thing with malformed location: %r", thing)
        return None

    move = Movement(
        quantity=thing.number,
        faction=thing.faction,
        piece_kind=kind,
        piece_key=thing.piece or kind.value,
        source=source,
        source_sub_area=source_sub_area,
        destination=destination,
        destination_sub_area=destination_sub_area,
    )
    text = (
        f"{_describe_pieces(thing, kind)} "
        f"from {_describe_location(source, source_sub_area)} "
        f"to {_describe_location(destination, destination_sub_area)}"
    )
    return move, text


def _format_things(things) -> Fields:
    moves: List[Movement] = []
    strings: List[str] = []
    for thing in things:
        formatted = _format_thing(thing)
        if formatted is None:
            continue
        moves.append(formatted[0])
        strings.append(formatted[1])

    fields: Fields = {"movements": tuple(moves)}
    if strings:
        fields["description"] = f"Moves {', '.join(strings)}"
    return fields


def _gain_vp(act: RawGainVP) -> Fields:
    return {
        "score_delta": ScoreDelta(faction=act.faction, amount=act.vp),
        "description": f"{reference.faction_proper_name(act.faction)} gains {act.vp} VP",
    }


def _combat(act: RawCombat) -> Fields:
    return {
        "description": (
            f"{reference.faction_proper_name(act.attacker)} attacks "
            f"{reference.faction_proper_name(act.defender)} in clearing {act.clearing}"
        )
    }


def _craft(act: RawCraft) -> Fields:
    if act.craft_item:
        return {
            "craft_event": CraftEvent(item_key=act.craft_item),
            "description": f"Crafts {reference.item_name(act.craft_item)}",
        }
    if act.craft_card:
        return {"description": f"Crafts {act.craft_card}"}
    return {}


def _move(act: RawMove) -> Fields:
    return _format_things(act.things)


def _reveal(act: RawReveal) -> Fields:
    return {"description": f"Reveals {canonical_json_str(act.payload)}"}


def _update_funds(act: RawUpdateFunds) -> Fields:
    return {"description": f"Updates funds {canonical_json_str(act.payload)}"}


def _clear_path(act: RawClearPath) -> Fields:
    a, b = (list(act.clearings) + [None, None])[:2]
    return {"description": f"Clears path between clearings {a} and {b}"}


def _set_outcast(act: RawSetOutcast) -> Fields:
    hated = "hated " if act.is_hated else ""
    return {"description": f"Sets {hated}outcast to {reference.suit_name(act.suit)}"}


def _set_prices(act: RawSetPrices) -> Fields:
    kinds = ", ".join(reference.riverfolk_cost_name(p) for p in act.price_types)
    return {"description": f"Sets prices {kinds} to {act.price}"}


def _flip_plot(act: RawFlipPlot) -> Fields:
    fields = _format_things(act.things)
    fields["description"] = f"Flips plot {reference.corvid_plot_name(act.plot)}"
    if act.clearing is None:
        logger.debug("Flipped plot has no clearing, board unchanged: %r", act)
        return fields
    fields["description"] += f" in clearing {act.clearing}"
    plot_moves = (
        Movement(
            quantity=1,
            faction=CORVID,
            piece_kind=PieceKind.TOKEN,
            piece_key=FACE_DOWN_PLOT,
            source=act.clearing,
        ),
        Movement(
            quantity=1,
            faction=CORVID,
            piece_kind=PieceKind.TOKEN,
            piece_key=act.plot,
            destination=act.clearing,
        ),
    )
    fields["movements"] = fields["movements"] + plot_moves
    return fields


def _swap_plots(act: RawSwapPlots) -> Fields:
    a, b = (list(act.clearings) + [None, None])[:2]
    return {"description": f"Swaps plots between clearings {a} and {b}"}


FORMATTERS: Dict[type, Callable[[Any], Fields]] = {
    RawGainVP: _gain_vp,
    RawCombat: _combat,
    RawCraft: _craft,
    RawMove: _move,
    RawReveal: _reveal,
    RawUpdateFunds: _update_funds,
    RawClearPath: _clear_path,
    RawSetOutcast: _set_outcast,
    RawSetPrices: _set_prices,
    RawFlipPlot: _flip_plot,
    RawSwapPlots: _swap_plots,
}


def format_action(act: RawAction, acting_party: str) -> NormalizedAction:
    """
    Format one raw action taken during acting_party's turn.

    Unrecognized variants (and recognized ones that yield nothing, such as a
    move whose things were all skipped) keep the placeholder description and
    carry no delta.

    Args:
        act: Raw action variant
        acting_party: Faction whose turn it is

    Returns:
        NormalizedAction without turn_boundary (set by the replay driver)
    """
    fields: Fields = {"description": placeholder(act.raw)}
    handler = FORMATTERS.get(type(act))
    if handler is not None:
        fields.update(handler(act))
    return NormalizedAction(acting_party=acting_party, **fields)
