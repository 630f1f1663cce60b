"""
Raw game-log structures.

These mirror what the external rootlog parser produces. Each raw action is
one variant of a closed set, selected once when the log is loaded, so the
formatter can match on type instead of probing fields.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class FactionBoard:
    """Off-board holding area belonging to one faction."""
    faction: str


@dataclass(frozen=True)
class Forest:
    """Named sub-area enclosed by the given clearings."""
    clearings: Tuple[int, ...]

    @property
    def key(self) -> str:
        return "_".join(str(c) for c in sorted(self.clearings))


# None = supply, int/str = clearing token (possibly malformed)
RawLocation = Union[None, int, str, FactionBoard, Forest]


@dataclass(frozen=True)
class RawThing:
    """
    One thing being moved by a move action.

    Fields:
        number: How many pieces move (None if the count was unreadable)
        faction: Owning faction of the piece (None if the thing is not a piece)
        piece_type: Piece kind code ("w", "p", "b", "t", "r")
        piece: Piece identifier within the faction (e.g. "s" for sawmill)
        start: Source location, None for supply
        destination: Destination location, None for supply
    """
    number: Optional[int] = 1
    faction: Optional[str] = None
    piece_type: Optional[str] = None
    piece: Optional[str] = None
    start: RawLocation = None
    destination: RawLocation = None


@dataclass(frozen=True)
class RawAction:
    """Base for all raw action variants."""
    raw: str = ""


@dataclass(frozen=True)
class RawUnknown(RawAction):
    pass


@dataclass(frozen=True)
class RawGainVP(RawAction):
    faction: str = ""
    vp: int = 0


@dataclass(frozen=True)
class RawCombat(RawAction):
    attacker: str = ""
    defender: str = ""
    clearing: Optional[int] = None


@dataclass(frozen=True)
class RawCraft(RawAction):
    craft_card: Optional[str] = None
    craft_item: Optional[str] = None


@dataclass(frozen=True)
class RawMove(RawAction):
    things: Tuple[RawThing, ...] = ()


@dataclass(frozen=True)
class RawReveal(RawAction):
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RawClearPath(RawAction):
    clearings: Tuple[int, ...] = ()


@dataclass(frozen=True)
class RawSetOutcast(RawAction):
    suit: str = ""
    is_hated: bool = False


@dataclass(frozen=True)
class RawSetPrices(RawAction):
    price_types: Tuple[str, ...] = ()
    price: int = 0


@dataclass(frozen=True)
class RawUpdateFunds(RawAction):
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RawFlipPlot(RawAction):
    """
    Corvid plot flip.

    May also carry moved things when the parser attached them to the same
    entry; those are formatted before the plot movements are appended.
    """
    plot: str = ""
    clearing: Optional[int] = None
    things: Tuple[RawThing, ...] = ()


@dataclass(frozen=True)
class RawSwapPlots(RawAction):
    clearings: Tuple[int, ...] = ()


@dataclass(frozen=True)
class Turn:
    """One turn: the acting faction and its actions in order."""
    taker: str
    actions: Tuple[RawAction, ...] = ()


@dataclass(frozen=True)
class GameLog:
    """
    Parsed game log.

    Fields:
        map: Board layout identifier (e.g. "Fall")
        players: faction -> player name
        turns: Turns in play order
        id: Optional identifier used for log correlation
    """
    map: str
    players: Dict[str, str] = field(default_factory=dict)
    turns: Tuple[Turn, ...] = ()
    id: Optional[str] = None
