"""
Replay command: rebuild state from a recording
"""

import json
from importlib import import_module
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.pretty import Pretty
from rich.table import Table

from ...core.canonical import canonicalize, state_hash
from ...core.errors import RecorderError
from ...log import MemoryActionLog
from ...replay import RecordingStore
from .log import read_entries, resolve_recording_path

console = Console()


def load_object(ref: str) -> Any:
    """
    Import an object from a "package.module:attribute" reference.

    Raises:
        ValueError: If ref has no ":" separator
    """
    module_name, sep, attr = ref.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Expected module:attribute, got {ref!r}")
    obj: Any = import_module(module_name)
    for part in attr.split("."):
        obj = getattr(obj, part)
    return obj


def replay_command(
    reducer_ref: str = typer.Option(..., "--reducer", "-r", help="Reducer as module:attribute"),
    type_map_refs: Optional[List[str]] = typer.Option(
        None, "--type-map", "-m", help="Type map as module:attribute (repeatable, later wins)"
    ),
    path: Optional[str] = typer.Option(None, "--file", "-f", help="Path to recording file"),
    until: Optional[int] = typer.Option(None, "--until", "-u", help="Replay the first N actions"),
    show_state: bool = typer.Option(False, "--show-state", "-s", help="Show final state"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Rebuild state from a recording without modifying it.

    Examples:
        recorder replay --reducer app.reducers:root
        recorder replay -r app.reducers:root -m app.actions:TYPE_MAP --until 10
        recorder replay -r app.reducers:root --show-state --json
    """
    path = resolve_recording_path(path)
    try:
        reducer = load_object(reducer_ref)
        type_maps = [load_object(ref) for ref in (type_map_refs or [])]

        entries = read_entries(path)
        store = RecordingStore(reducer, type_maps=type_maps, action_log=MemoryActionLog())
        actions = [store.registry.decode(entry.action) for entry in entries]

        target = len(actions) if until is None else min(until, len(actions))
        if not json_output:
            console.print("[bold]Replaying recording...[/bold]")
        result = store.replay_to_state(actions, target)

        action_counts = {}
        for entry in entries[:target]:
            action_counts[entry.action.type] = action_counts.get(entry.action.type, 0) + 1

        if json_output:
            output = {
                "success": True,
                "actions_recorded": len(entries),
                "actions_replayed": result.applied,
                "action_counts": action_counts,
                "state_hash": state_hash(result.state),
            }
            if show_state:
                output["state"] = canonicalize(result.state)
            print(json.dumps(output, indent=2, default=repr))
        else:
            console.print(f"[green]✓ Replayed {result.applied} of {len(entries)} actions[/green]")
            console.print(f"  State hash: [yellow]{state_hash(result.state)}[/yellow]")

            table = Table(title="Action Counts")
            table.add_column("Action Type", style="green")
            table.add_column("Count", style="cyan", justify="right")
            for action_type in sorted(action_counts.keys()):
                table.add_row(action_type, str(action_counts[action_type]))
            console.print(table)

            if show_state:
                console.print("\n[bold]Final State:[/bold]")
                console.print(Pretty(result.state))

        raise typer.Exit(0)

    except FileNotFoundError:
        if json_output:
            print(json.dumps({"error": "Recording not found", "path": path}))
        else:
            console.print(f"[red]Error: Recording not found:[/red] {path}")
        raise typer.Exit(2)
    except (ImportError, AttributeError, ValueError, RecorderError) as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
