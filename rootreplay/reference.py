"""
Static reference tables.

Board coordinates per layout and display names for factions, suits, pieces,
items, price kinds and plots. Pure data plus lookups; loaded once and never
mutated.
"""

from typing import Dict, List, Mapping, Tuple

from .core.errors import LayoutMismatchError

Position = Tuple[float, float]

# Clearing coordinates as percentages of the board image, clearing 1 first.
CLEARING_POSITIONS: Dict[str, List[Position]] = {
    "Fall": [
        (9.6, 10.2), (88.9, 13.1), (89.7, 86.4), (10.4, 86.9),
        (41.2, 7.8), (66.1, 28.4), (83.2, 52.9), (56.4, 87.8),
        (31.5, 72.6), (9.1, 46.7), (34.1, 36.5), (58.8, 56.1),
    ],
    "Winter": [
        (10.5, 11.9), (89.3, 11.2), (89.1, 86.7), (11.2, 87.4),
        (36.9, 6.4), (62.8, 7.1), (86.6, 48.8), (62.0, 88.9),
        (37.5, 89.2), (13.4, 49.5), (38.9, 43.6), (62.3, 44.1),
    ],
    "Lake": [
        (88.4, 88.1), (10.3, 10.5), (88.8, 11.4), (11.6, 87.2),
        (39.6, 8.6), (65.7, 32.1), (89.5, 50.3), (60.2, 88.4),
        (35.3, 70.9), (10.9, 45.9), (33.6, 35.8), (62.9, 64.8),
    ],
    "Mountain": [
        (10.2, 11.3), (89.5, 14.8), (88.3, 87.6), (10.8, 85.9),
        (45.3, 9.2), (66.8, 34.7), (86.2, 55.1), (59.4, 86.1),
        (30.8, 71.4), (11.9, 42.2), (30.2, 34.5), (55.6, 57.3),
    ],
}

# Forest coordinates keyed by the sorted, underscore-joined clearings that
# enclose the forest.
FOREST_POSITIONS: Dict[str, Dict[str, Position]] = {
    "Fall": {
        "1_5_10_11": (22.4, 24.1),
        "2_5_6": (65.3, 13.9),
        "5_6_11_12": (49.8, 32.0),
        "2_6_7": (80.2, 32.6),
        "6_7_12": (69.6, 45.3),
        "3_7_8_12": (72.5, 70.8),
        "8_9_12": (50.1, 71.2),
        "4_9_10": (18.7, 69.5),
        "9_10_11_12": (35.9, 54.4),
    },
    "Winter": {
        "1_5_10_11": (24.0, 26.3),
        "5_6_11_12": (50.1, 23.4),
        "2_6_7_12": (76.2, 26.8),
        "3_7_8_12": (75.8, 70.4),
        "8_9_11_12": (50.3, 69.1),
        "4_9_10_11": (24.7, 70.2),
    },
    "Lake": {
        "2_5_10_11": (22.6, 24.3),
        "3_5_6": (64.8, 16.5),
        "5_6_11": (46.9, 24.7),
        "3_6_7": (81.0, 31.2),
        "6_7_12": (73.4, 50.6),
        "1_7_8_12": (76.1, 75.3),
        "8_9_12": (53.4, 76.6),
        "4_9_10": (19.8, 69.3),
        "9_10_11": (26.7, 52.9),
    },
    "Mountain": {
        "1_5_11": (28.8, 18.2),
        "2_5_6": (68.4, 18.7),
        "5_6_11_12": (48.1, 35.9),
        "2_6_7": (80.5, 34.2),
        "6_7_12": (70.2, 52.4),
        "3_7_8_12": (73.9, 73.5),
        "8_9_12": (48.6, 73.8),
        "4_9_10": (17.6, 66.7),
        "1_10_11": (17.4, 30.6),
        "9_10_11_12": (32.7, 53.0),
    },
}

FACTION_NAMES: Dict[str, str] = {
    "C": "Marquise",
    "E": "Eyrie",
    "A": "Alliance",
    "V": "Vagabond",
    "G": "Vagabond (2nd)",
    "O": "Riverfolk",
    "L": "Lizards",
    "D": "Duchy",
    "P": "Corvids",
    "H": "Hundreds",
    "K": "Keepers",
}

FACTION_PROPER_NAMES: Dict[str, str] = {
    "C": "Marquise de Cat",
    "E": "Eyrie Dynasties",
    "A": "Woodland Alliance",
    "V": "Vagabond",
    "G": "Second Vagabond",
    "O": "Riverfolk Company",
    "L": "Lizard Cult",
    "D": "Underground Duchy",
    "P": "Corvid Conspiracy",
    "H": "Lord of the Hundreds",
    "K": "Keepers in Iron",
}

SUIT_NAMES: Dict[str, str] = {
    "B": "Bird",
    "F": "Fox",
    "M": "Mouse",
    "R": "Rabbit",
}

PIECE_NAMES: Dict[str, str] = {
    "w": "Warrior",
    "p": "Pawn",
    "b": "Building",
    "t": "Token",
    "r": "Raft",
}

ITEM_NAMES: Dict[str, str] = {
    "b": "Bag",
    "f": "Boot",
    "c": "Crossbow",
    "h": "Hammer",
    "s": "Sword",
    "t": "Tea",
    "m": "Coin",
    "r": "Torch",
}

# Keyed "<faction>_<piece>", lowercase.
BUILDING_TOKEN_NAMES: Dict[str, str] = {
    "c_s": "Sawmill",
    "c_w": "Workshop",
    "c_r": "Recruiter",
    "c_t": "Wood",
    "c_k": "Keep",
    "e_b": "Roost",
    "a_m": "Mouse Base",
    "a_r": "Rabbit Base",
    "a_f": "Fox Base",
    "a_t": "Sympathy",
    "o_m": "Mouse Trade Post",
    "o_r": "Rabbit Trade Post",
    "o_f": "Fox Trade Post",
    "l_m": "Mouse Garden",
    "l_r": "Rabbit Garden",
    "l_f": "Fox Garden",
    "d_c": "Citadel",
    "d_m": "Market",
    "d_t": "Tunnel",
    "p_t": "Plot",
    "p_b": "Bomb",
    "p_s": "Snare",
    "p_e": "Extortion",
    "p_r": "Raid",
    "h_b": "Stronghold",
    "h_m": "Mob",
    "k_w": "Waystation",
    "k_t": "Relic",
}

RIVERFOLK_COST_NAMES: Dict[str, str] = {
    "h": "Hand Card",
    "r": "Riverboats",
    "m": "Mercenaries",
}

CORVID_PLOT_NAMES: Dict[str, str] = {
    "t": "Face-down Plot",
    "b": "Bomb",
    "s": "Snare",
    "e": "Extortion",
    "r": "Raid",
}

# Slots of the shared item supply: (item, crafted once count exceeds this)
ALL_ITEMS: List[Tuple[str, int]] = [
    ("b", 0), ("b", 1),
    ("f", 0), ("f", 1),
    ("m", 0), ("m", 1),
    ("c", 0),
    ("h", 0),
    ("s", 0), ("s", 1),
    ("t", 0), ("t", 1),
]


def _layout(table: Mapping[str, object], board_layout: str):
    if board_layout not in table:
        raise LayoutMismatchError(f"Unknown board layout: {board_layout}")
    return table[board_layout]


def clearing_positions(board_layout: str) -> List[Position]:
    return list(_layout(CLEARING_POSITIONS, board_layout))


def region_count(board_layout: str) -> int:
    """Number of numbered play regions (clearings) on the layout."""
    return len(_layout(CLEARING_POSITIONS, board_layout))


def forests(board_layout: str) -> Dict[str, Position]:
    return dict(_layout(FOREST_POSITIONS, board_layout))


def forest_position(board_layout: str, forest_key: str) -> Position:
    return forests(board_layout).get(forest_key, (0.0, 0.0))


def faction_name(faction: str) -> str:
    return FACTION_NAMES.get(faction, faction)


def faction_proper_name(faction: str) -> str:
    return FACTION_PROPER_NAMES.get(faction, faction)


def suit_name(suit: str) -> str:
    return SUIT_NAMES.get(suit, suit)


def piece_name(piece_type: str) -> str:
    return PIECE_NAMES.get(piece_type, piece_type)


def item_name(item: str) -> str:
    return ITEM_NAMES.get(item, item)


def building_token_name(faction: str, piece: str) -> str:
    key = f"{faction}_{piece}".lower()
    return BUILDING_TOKEN_NAMES.get(key, key)


def riverfolk_cost_name(cost: str) -> str:
    return RIVERFOLK_COST_NAMES.get(cost, cost)


def corvid_plot_name(plot: str) -> str:
    return CORVID_PLOT_NAMES.get(plot, plot)
