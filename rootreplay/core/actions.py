"""
Normalized action records.

NormalizedAction is the formatter's output and the reducer's input. It
carries a description and at most one structured delta kind.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from .raw import FactionBoard


class PieceKind(str, Enum):
    WARRIOR = "w"
    PAWN = "p"
    BUILDING = "b"
    TOKEN = "t"
    RAFT = "r"


# Numbered region index, or a faction's off-board holding area
Location = Union[int, FactionBoard]


@dataclass(frozen=True)
class ScoreDelta:
    faction: str
    amount: int


@dataclass(frozen=True)
class CraftEvent:
    item_key: str


@dataclass(frozen=True)
class Movement:
    """
    One piece movement.

    Fields:
        quantity: Number of pieces moved (always positive)
        faction: Owning faction
        piece_kind: Kind of piece
        piece_key: Piece identifier within the faction
        source: Region index or faction board (None with no sub-area = supply)
        source_sub_area: Sub-area key (exclusive with source)
        destination: Region index or faction board (None with no sub-area = supply)
        destination_sub_area: Sub-area key (exclusive with destination)
    """
    quantity: int
    faction: str
    piece_kind: PieceKind
    piece_key: str
    source: Optional[Location] = None
    source_sub_area: Optional[str] = None
    destination: Optional[Location] = None
    destination_sub_area: Optional[str] = None

    @property
    def formatted_piece(self) -> str:
        """Key used in region building/token maps (e.g. "c_s")."""
        return f"{self.faction.lower()}_{self.piece_key}"


@dataclass(frozen=True)
class NormalizedAction:
    """
    Formatted action ready for reduction.

    Fields:
        description: Human-readable summary
        acting_party: Faction whose turn this action belongs to
        turn_boundary: Acting faction, set only on the first action of a turn
        score_delta: Score change, if any
        craft_event: Crafted item, if any
        movements: Piece movements in application order
    """
    description: str
    acting_party: str
    turn_boundary: Optional[str] = None
    score_delta: Optional[ScoreDelta] = None
    craft_event: Optional[CraftEvent] = None
    movements: Tuple[Movement, ...] = ()
