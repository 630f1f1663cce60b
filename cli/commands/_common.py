"""
Shared loading and error reporting for CLI commands.
"""

import json
from typing import List, Optional, Tuple

import typer
from rich.console import Console

from rootreplay.core.errors import ReplayError
from rootreplay.core.raw import GameLog
from rootreplay.log import load_game
from rootreplay.replay import ReplayStep, replay

console = Console()


def fail(message: str, json_output: bool, **extra) -> None:
    """Report an error and exit with code 2."""
    if json_output:
        print(json.dumps({"error": message, **extra}))
    else:
        console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(2)


def load_and_replay(game_path: str, json_output: bool) -> Tuple[GameLog, List[ReplayStep]]:
    try:
        game = load_game(game_path)
        return game, replay(game)
    except FileNotFoundError:
        fail("Game log not found", json_output, path=game_path)
    except ReplayError as e:
        fail(str(e), json_output)


def step_at(steps: List[ReplayStep], at: Optional[int], json_output: bool) -> ReplayStep:
    """Step after action `at` (default: the last one)."""
    if not steps:
        fail("Game log has no actions", json_output)
    if at is None:
        return steps[-1]
    if at < 0 or at >= len(steps):
        fail(f"Action index {at} out of range (0..{len(steps) - 1})", json_output)
    return steps[at]
