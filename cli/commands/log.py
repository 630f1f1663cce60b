"""
Game log commands: actions, region
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from rootreplay import reference
from rootreplay.core.errors import RegionIndexError
from rootreplay.query import expand_buildings, expand_tokens, region

from ._common import fail, load_and_replay, step_at

app = typer.Typer()
console = Console()


@app.command()
def actions(
    game_path: str = typer.Option(..., "--game", "-g", help="Path to parsed game log (JSON)"),
    turn: Optional[str] = typer.Option(None, "--turn", "-t", help="Only actions taken during this faction's turns"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    List normalized actions.

    Examples:
        rootreplay log actions --game game.json
        rootreplay log actions --game game.json --turn C --json
    """
    _, steps = load_and_replay(game_path, json_output)

    rows = [
        {
            "index": i,
            "acting_party": s.action.acting_party,
            "turn_boundary": s.action.turn_boundary,
            "description": s.action.description,
        }
        for i, s in enumerate(steps)
        if turn is None or s.action.acting_party == turn
    ]

    if json_output:
        print(json.dumps({"actions": rows, "count": len(rows)}, indent=2))
        return

    if not rows:
        console.print("[yellow]No actions match the filters[/yellow]")
        return

    table = Table(title=f"Actions: {game_path}")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Turn", style="green")
    table.add_column("Description")
    for row in rows:
        marker = "▶ " if row["turn_boundary"] else "  "
        table.add_row(
            str(row["index"]),
            marker + reference.faction_name(row["acting_party"]),
            row["description"],
        )
    console.print(table)
    console.print(f"\n[bold]Total actions:[/bold] {len(rows)}")


@app.command("region")
def region_command(
    game_path: str = typer.Option(..., "--game", "-g", help="Path to parsed game log (JSON)"),
    at: Optional[int] = typer.Option(None, "--at", "-a", help="Action index (default: last)"),
    index: int = typer.Option(..., "--region", "-r", help="Region index (0 = burrow)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show pieces in one region after an action.

    Examples:
        rootreplay log region --game game.json --region 3
        rootreplay log region --game game.json --at 12 --region 0 --json
    """
    _, steps = load_and_replay(game_path, json_output)
    step = step_at(steps, at, json_output)
    try:
        area = region(step.state, index)
    except RegionIndexError as e:
        fail(str(e), json_output)

    warriors = {f: n for f, n in sorted(area.warriors.items()) if n}
    buildings = expand_buildings(area)
    tokens = expand_tokens(area)

    if json_output:
        print(json.dumps({"region": index, "warriors": warriors, "buildings": buildings, "tokens": tokens}, indent=2))
        return

    console.print(f"[bold cyan]Region {index}[/bold cyan]")
    for faction, n in warriors.items():
        console.print(f"  {reference.faction_name(faction)} warriors: [green]{n}[/green]")
    for piece in buildings:
        console.print(f"  Building: {reference.BUILDING_TOKEN_NAMES.get(piece, piece)}")
    for piece in tokens:
        console.print(f"  Token: {reference.BUILDING_TOKEN_NAMES.get(piece, piece)}")
    if not (warriors or buildings or tokens):
        console.print("  [dim]empty[/dim]")
