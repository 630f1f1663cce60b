"""
Game-log loading.

This module provides:
- game_from_dict: Decode the parser's JSON form into a GameLog
- load_game: Read and decode a JSON file
- is_valid_game: Cheap validity check
"""

from .loader import action_from_dict, game_from_dict, is_valid_game, load_game

__all__ = [
    "action_from_dict",
    "game_from_dict",
    "is_valid_game",
    "load_game",
]
