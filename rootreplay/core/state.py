"""
Board state model.

BoardSnapshot is the full board after one action. Snapshots are immutable;
the reducer works on a plain-dict draft (to_dict) and freezes the result
back into a new snapshot (from_dict).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Tuple


@dataclass(frozen=True)
class RegionState:
    """
    Pieces present in one region or sub-area.

    Fields:
        warriors: faction -> warrior (or pawn) count
        buildings: formatted piece key -> count
        tokens: formatted piece key -> count
    """
    warriors: Dict[str, int] = field(default_factory=dict)
    buildings: Dict[str, int] = field(default_factory=dict)
    tokens: Dict[str, int] = field(default_factory=dict)

    @staticmethod
    def empty(factions: Iterable[str] = ()) -> "RegionState":
        return RegionState(warriors={f: 0 for f in factions})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "warriors": dict(self.warriors),
            "buildings": dict(self.buildings),
            "tokens": dict(self.tokens),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "RegionState":
        data = data or {}
        return RegionState(
            warriors=dict(data.get("warriors", {})),
            buildings=dict(data.get("buildings", {})),
            tokens=dict(data.get("tokens", {})),
        )


@dataclass(frozen=True)
class BoardSnapshot:
    """
    Immutable board state.

    Fields:
        faction_scores: faction -> victory points (never negative)
        regions: index 0 is the burrow, 1..N are clearings
        crafted_counts: item key -> times crafted
        sub_areas: forest key -> pieces in that forest
    """
    faction_scores: Dict[str, int] = field(default_factory=dict)
    regions: Tuple[RegionState, ...] = ()
    crafted_counts: Dict[str, int] = field(default_factory=dict)
    sub_areas: Dict[str, RegionState] = field(default_factory=dict)

    @staticmethod
    def initial(
        factions: Iterable[str], region_count: int, sub_area_keys: Iterable[str] = ()
    ) -> "BoardSnapshot":
        """
        Build the zero state.

        Every faction starts at 0 VP and with an explicit 0 warrior count in
        every region; sub-areas start fully empty.

        Args:
            factions: Participating factions
            region_count: Number of play regions (the burrow is added on top)
            sub_area_keys: Named sub-areas of the board layout
        """
        factions = list(factions)
        return BoardSnapshot(
            faction_scores={f: 0 for f in factions},
            regions=tuple(RegionState.empty(factions) for _ in range(region_count + 1)),
            crafted_counts={},
            sub_areas={key: RegionState() for key in sub_area_keys},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Deep, independent plain-data copy."""
        return {
            "faction_scores": dict(self.faction_scores),
            "regions": [r.to_dict() for r in self.regions],
            "crafted_counts": dict(self.crafted_counts),
            "sub_areas": {k: v.to_dict() for k, v in self.sub_areas.items()},
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "BoardSnapshot":
        data = data or {}
        return BoardSnapshot(
            faction_scores=dict(data.get("faction_scores", {})),
            regions=tuple(RegionState.from_dict(r) for r in data.get("regions", [])),
            crafted_counts=dict(data.get("crafted_counts", {})),
            sub_areas={k: RegionState.from_dict(v) for k, v in data.get("sub_areas", {}).items()},
        )
