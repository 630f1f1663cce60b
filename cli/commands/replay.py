"""
Replay command: replay a game log and show board state
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from rootreplay import reference
from rootreplay.core.canonical import snapshot_to_dict, state_hash
from rootreplay.query import faction_score, player_order

from ._common import load_and_replay, step_at

console = Console()


def replay_command(
    game_path: str = typer.Option(..., "--game", "-g", help="Path to parsed game log (JSON)"),
    at: Optional[int] = typer.Option(None, "--at", "-a", help="Show state after this action index"),
    show_state: bool = typer.Option(False, "--show-state", "-s", help="Show full board state"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay a game log into per-action board snapshots.

    Examples:
        rootreplay replay --game game.json
        rootreplay replay --game game.json --at 10
        rootreplay replay --game game.json --show-state --json
    """
    game, steps = load_and_replay(game_path, json_output)
    step = step_at(steps, at, json_output)
    index = len(steps) - 1 if at is None else at
    snapshot_hash = state_hash(step.state)
    players = player_order(game)

    if json_output:
        output = {
            "success": True,
            "map": game.map,
            "actions_replayed": len(steps),
            "turns": len(game.turns),
            "action_index": index,
            "description": step.action.description,
            "scores": {f: faction_score(step.state, f) for f, _ in players},
            "state_hash": snapshot_hash,
        }
        if show_state:
            output["state"] = snapshot_to_dict(step.state)
        print(json.dumps(output, indent=2))
        return

    console.print(f"[green]✓ Replayed {len(steps)} actions over {len(game.turns)} turns[/green]")
    console.print(f"  Map: [cyan]{game.map}[/cyan]")
    console.print(f"  Action {index}: {step.action.description}")
    console.print(f"  State hash: [yellow]{snapshot_hash}[/yellow]")

    table = Table(title="Scores")
    table.add_column("Faction", style="green")
    table.add_column("Player")
    table.add_column("VP", style="cyan", justify="right")
    for faction, player in players:
        table.add_row(reference.faction_proper_name(faction), player, str(faction_score(step.state, faction)))
    console.print(table)

    if show_state:
        console.print("\n[bold]Board State:[/bold]")
        syntax = Syntax(json.dumps(snapshot_to_dict(step.state), indent=2), "json", theme="monokai")
        console.print(syntax)
