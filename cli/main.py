#!/usr/bin/env python3
"""
rootreplay CLI - Root game log replay

Main entrypoint for the rootreplay command-line tool.
"""

import os
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import log, replay
from rootreplay.logging_config import setup_logging

app = typer.Typer(
    name="rootreplay",
    help="Replay Root game logs into per-action board snapshots",
    add_completion=False,
)

console = Console()

app.add_typer(log.app, name="log", help="Inspect normalized actions and regions")

app.command("replay")(replay.replay_command)


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="DEBUG, INFO, WARNING or ERROR (default: $ROOTREPLAY_LOG_LEVEL or WARNING)"
    ),
    log_format: Optional[str] = typer.Option(
        None, "--log-format", help="json or text (default: $ROOTREPLAY_LOG_FORMAT or text)"
    ),
):
    """Configure logging for all commands."""
    setup_logging(level=log_level or os.getenv("ROOTREPLAY_LOG_LEVEL", "WARNING"), log_format=log_format)


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from rootreplay import __version__ as engine_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]rootreplay CLI[/bold]", f"v{__version__}")
    table.add_row("Engine", f"v{engine_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
