#!/usr/bin/env python3
"""
Recorder CLI - inspect and replay action recordings

Main entrypoint for the recorder command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from ..logging_config import setup_logging
from .commands import log, replay

# Initialize Typer app
app = typer.Typer(
    name="recorder",
    help="Inspect and replay recorded store actions",
    add_completion=False,
)

console = Console()

app.add_typer(log.app, name="log", help="Recording log operations")
app.command(name="replay")(replay.replay_command)


@app.callback()
def configure():
    """Configure logging before any command runs."""
    setup_logging()


@app.command()
def version():
    """Show version information."""
    from .. import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Recorder CLI[/bold]", f"v{__version__}")
    table.add_row("Log format", "JSON array, whole-log rewrite")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
