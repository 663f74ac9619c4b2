"""
Recording log commands: tail, inspect
"""

import json
import os
from typing import List, Optional

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from ...config import recording_directory, recording_filename
from ...core.actions import NULL_PAYLOAD
from ...log import FileActionLog, RecordedEntry

app = typer.Typer()
console = Console()


def resolve_recording_path(path: Optional[str]) -> str:
    """Recording path from --file or the environment defaults."""
    if path:
        return os.path.abspath(os.path.expanduser(path))
    return os.path.join(recording_directory(), recording_filename())


def read_entries(path: str) -> List[RecordedEntry]:
    """
    Load entries from a recording file.

    Raises:
        FileNotFoundError: If path does not exist
    """
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    return FileActionLog(os.path.dirname(path), os.path.basename(path)).load()


def _entry_record(idx: int, entry: RecordedEntry, show_payload: bool = True) -> dict:
    rec = {"index": idx, **entry.to_dict()}
    if not show_payload:
        rec["action"]["payload"] = "<hidden>"
    return rec


def _print_error(error: str, path: str, json_output: bool) -> None:
    if json_output:
        print(json.dumps({"error": error, "path": path}))
    else:
        console.print(f"[red]Error: {error}:[/red] {path}")


@app.command()
def tail(
    path: Optional[str] = typer.Option(None, "--file", "-f", help="Path to recording file"),
    lines: Optional[int] = typer.Option(None, "--lines", "-n", help="Number of entries to show"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show the last recorded actions.

    Examples:
        recorder log tail
        recorder log tail --lines 10
        recorder log tail --json
    """
    path = resolve_recording_path(path)
    try:
        indexed = list(enumerate(read_entries(path)))
    except FileNotFoundError:
        _print_error("Recording not found", path, json_output)
        raise typer.Exit(2)

    if lines:
        indexed = indexed[-lines:]

    if json_output:
        records = [_entry_record(idx, entry) for idx, entry in indexed]
        print(json.dumps({"entries": records, "count": len(records)}, indent=2))
        raise typer.Exit(0)

    if not indexed:
        console.print("[yellow]Recording is empty[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Recording: {path}")
    table.add_column("Index", style="cyan", justify="right")
    table.add_column("Timestamp", style="dim")
    table.add_column("Type", style="green")
    table.add_column("Typed", style="yellow")

    for idx, entry in indexed:
        table.add_row(
            str(idx),
            f"{entry.timestamp:.3f}",
            entry.action.type,
            "yes" if entry.action.is_typed_action else "no",
        )

    console.print(table)
    console.print(f"\n[bold]Total entries:[/bold] {len(indexed)}")
    raise typer.Exit(0)


@app.command()
def inspect(
    path: Optional[str] = typer.Option(None, "--file", "-f", help="Path to recording file"),
    from_index: Optional[int] = typer.Option(None, "--from", help="Start from entry index"),
    to_index: Optional[int] = typer.Option(None, "--to", help="End at entry index (inclusive)"),
    action_type: Optional[str] = typer.Option(None, "--type", "-t", help="Filter by action type"),
    show_payload: bool = typer.Option(False, "--payload", "-p", help="Show full payload"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Inspect recorded actions with filters.

    Examples:
        recorder log inspect --from 0 --to 10
        recorder log inspect --type INCREMENT
        recorder log inspect --payload --json
    """
    path = resolve_recording_path(path)
    try:
        indexed = list(enumerate(read_entries(path)))
    except FileNotFoundError:
        _print_error("Recording not found", path, json_output)
        raise typer.Exit(2)

    if from_index is not None:
        indexed = [(idx, e) for idx, e in indexed if idx >= from_index]
    if to_index is not None:
        indexed = [(idx, e) for idx, e in indexed if idx <= to_index]
    if action_type:
        indexed = [(idx, e) for idx, e in indexed if e.action.type == action_type]

    if json_output:
        records = [_entry_record(idx, entry, show_payload) for idx, entry in indexed]
        print(json.dumps({"entries": records, "count": len(records)}, indent=2))
        raise typer.Exit(0)

    if not indexed:
        console.print("[yellow]No entries match the filters[/yellow]")
        raise typer.Exit(0)

    for idx, entry in indexed:
        action = entry.action
        console.print(f"\n[bold cyan]Entry {idx}[/bold cyan]")
        console.print(f"  Type: [green]{action.type}[/green]")
        console.print(f"  Typed: {action.is_typed_action}")
        console.print(f"  Timestamp: {entry.timestamp}")

        if show_payload:
            if action.payload is None:
                console.print(f"  Payload: [dim]{NULL_PAYLOAD}[/dim]")
            else:
                console.print("  Payload:")
                syntax = Syntax(
                    json.dumps(action.payload, indent=2),
                    "json",
                    theme="monokai",
                    line_numbers=False,
                )
                console.print(syntax)

    console.print(f"\n[bold]Total entries:[/bold] {len(indexed)}")
    raise typer.Exit(0)
