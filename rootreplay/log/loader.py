"""
Game-log loader: parser JSON -> GameLog.

Decodes the JSON form of a parsed rootlog game. The raw action variant is
chosen here, once: by the explicit "type" field when present, otherwise by
which fields the entry carries.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from ..core.errors import GameLogError
from ..core.raw import (
    FactionBoard,
    Forest,
    GameLog,
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
    RawUnknown,
    RawUpdateFunds,
    Turn,
)


def _int(value: Any) -> Optional[int]:
    """Integer form of a count or clearing, None when it has none."""
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _location(value: Any) -> RawLocation:
    if value is None or isinstance(value, (int, str)):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else str(value)
    if isinstance(value, dict):
        if value.get("faction"):
            return FactionBoard(faction=str(value["faction"]))
        if value.get("clearings"):
            clearings = [_int(c) for c in value["clearings"]]
            if None not in clearings:
                return Forest(clearings=tuple(clearings))
    # Unrecognized shape: kept as a token the formatter will reject
    return str(value)


def _thing(data: Dict[str, Any]) -> RawThing:
    piece = data.get("thing")
    if not isinstance(piece, dict):
        piece = {}
    return RawThing(
        number=_int(data["number"]) if data.get("number") is not None else 1,
        faction=piece.get("faction"),
        piece_type=piece.get("pieceType"),
        piece=piece.get("piece"),
        start=_location(data.get("start")),
        destination=_location(data.get("destination")),
    )


def _things(data: Dict[str, Any]) -> tuple:
    return tuple(_thing(t) for t in data.get("things") or [] if isinstance(t, dict))


def _payload(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if k not in ("raw", "type")}


def _gain_vp(d: Dict[str, Any], raw: str) -> RawAction:
    return RawGainVP(raw=raw, faction=d.get("faction", ""), vp=_int(d.get("vp")) or 0)


def _combat(d: Dict[str, Any], raw: str) -> RawAction:
    return RawCombat(raw=raw, attacker=d.get("attacker", ""), defender=d.get("defender", ""), clearing=d.get("clearing"))


def _craft(d: Dict[str, Any], raw: str) -> RawAction:
    return RawCraft(raw=raw, craft_card=d.get("craftCard"), craft_item=d.get("craftItem"))


def _move(d: Dict[str, Any], raw: str) -> RawAction:
    return RawMove(raw=raw, things=_things(d))


def _reveal(d: Dict[str, Any], raw: str) -> RawAction:
    return RawReveal(raw=raw, payload=_payload(d))


def _clear_path(d: Dict[str, Any], raw: str) -> RawAction:
    return RawClearPath(raw=raw, clearings=tuple(d.get("clearings") or ()))


def _set_outcast(d: Dict[str, Any], raw: str) -> RawAction:
    return RawSetOutcast(raw=raw, suit=d.get("suit", ""), is_hated=bool(d.get("isHated")))


def _set_prices(d: Dict[str, Any], raw: str) -> RawAction:
    return RawSetPrices(raw=raw, price_types=tuple(d.get("priceTypes") or ()), price=_int(d.get("price")) or 0)


def _update_funds(d: Dict[str, Any], raw: str) -> RawAction:
    return RawUpdateFunds(raw=raw, payload=_payload(d))


def _flip_plot(d: Dict[str, Any], raw: str) -> RawAction:
    return RawFlipPlot(raw=raw, plot=d.get("plot", ""), clearing=_int(d.get("clearing")), things=_things(d))


def _swap_plots(d: Dict[str, Any], raw: str) -> RawAction:
    return RawSwapPlots(raw=raw, clearings=tuple(d.get("clearings") or ()))


Decoder = Callable[[Dict[str, Any], str], RawAction]

DECODERS_BY_TYPE: Dict[str, Decoder] = {
    "gainvp": _gain_vp,
    "combat": _combat,
    "craft": _craft,
    "move": _move,
    "reveal": _reveal,
    "clearpath": _clear_path,
    "setoutcast": _set_outcast,
    "setprices": _set_prices,
    "updatefunds": _update_funds,
    "flipplot": _flip_plot,
    "swapplots": _swap_plots,
}

# Probed in order when there is no "type" field.
SHAPES: List[tuple] = [
    (lambda d: bool(d.get("vp")), _gain_vp),
    (lambda d: bool(d.get("attacker")), _combat),
    (lambda d: bool(d.get("craftCard") or d.get("craftItem")), _craft),
    (lambda d: bool(d.get("things")), _move),
    (lambda d: bool(d.get("subjects")), _reveal),
    (lambda d: bool(d.get("clearings")), _clear_path),
    # False is a valid outcast value, so test identity rather than truthiness
    (lambda d: d.get("isHated") is True or d.get("isHated") is False, _set_outcast),
    (lambda d: bool(d.get("price")), _set_prices),
    (lambda d: bool(d.get("funds")), _update_funds),
    (lambda d: bool(d.get("plot")), _flip_plot),
]


def _type_key(value: Any) -> str:
    return str(value).lower().replace("_", "").replace("-", "").replace(" ", "")


def action_from_dict(data: Dict[str, Any]) -> RawAction:
    """
    Decode one raw action entry.

    Never raises for an unrecognized entry; it becomes RawUnknown.
    """
    raw = str(data.get("raw") or "")

    if "type" in data:
        decoder = DECODERS_BY_TYPE.get(_type_key(data["type"]))
        return decoder(data, raw) if decoder else RawUnknown(raw=raw)

    for matches, decoder in SHAPES:
        if matches(data):
            return decoder(data, raw)
    return RawUnknown(raw=raw)


def _turn(data: Any, idx: int) -> Turn:
    if not isinstance(data, dict) or not data.get("taker"):
        raise GameLogError(f"Turn {idx} has no taker")
    actions = data.get("actions", [])
    if not isinstance(actions, list):
        raise GameLogError(f"Turn {idx} actions must be a list")
    return Turn(
        taker=str(data["taker"]),
        actions=tuple(action_from_dict(a) if isinstance(a, dict) else RawUnknown(raw=str(a)) for a in actions),
    )


def game_from_dict(data: Dict[str, Any], game_id: Optional[str] = None) -> GameLog:
    """
    Decode a parsed game log.

    Args:
        data: {"map": ..., "players": {faction: name}, "turns": [...]}
        game_id: Identifier for log correlation (default: data["id"])

    Raises:
        GameLogError: If the structure is malformed
    """
    if not isinstance(data, dict):
        raise GameLogError("Game log must be a JSON object")
    if "turns" not in data or not isinstance(data["turns"], list):
        raise GameLogError("Game log has no turns list")
    if not data.get("map"):
        raise GameLogError("Game log has no map")

    players = data.get("players") or {}
    if not isinstance(players, dict):
        raise GameLogError("Game log players must be an object")

    return GameLog(
        map=str(data["map"]),
        players={str(k): str(v or "") for k, v in players.items()},
        turns=tuple(_turn(t, i) for i, t in enumerate(data["turns"])),
        id=game_id or data.get("id"),
    )


def load_game(path: Union[str, Path]) -> GameLog:
    """
    Load a parsed game log from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        GameLogError: If the file is not a valid game log
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise GameLogError(f"Invalid JSON in {path}: {e}") from e
    return game_from_dict(data, game_id=path.stem)


def is_valid_game(data: Any) -> bool:
    """True if data decodes to a game log with at least one turn."""
    if not data:
        return False
    try:
        return len(game_from_dict(data).turns) > 0
    except (GameLogError, TypeError, ValueError):
        return False
