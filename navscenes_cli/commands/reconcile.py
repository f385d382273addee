"""
Reconcile command: reconcile a single tree transition
"""

import json
from typing import Optional

import typer

from navscenes.core.canonical import scenes_digest, scenes_to_dicts
from navscenes.core.errors import InvalidStateError, ReconcileError, TraceError
from navscenes.core.reducer import reconcile
from navscenes.trace import RouteInterner, load_state

from ._output import console, fail, scenes_table


def reconcile_command(
    next_path: str = typer.Option(..., "--next", "-n", help="JSON file holding the next parent state"),
    prev_path: Optional[str] = typer.Option(
        None, "--prev", "-p", help="JSON file holding the previous parent state"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Reconcile a previous tree into a next tree and show the scenes.

    The previous tree is first reconciled on its own, then the transition
    to the next tree is applied, so stale scenes show up as they would for
    a renderer that had displayed the previous tree.

    Examples:
        navscenes reconcile --next next.json
        navscenes reconcile --prev prev.json --next next.json --json
    """
    path = next_path
    try:
        interner = RouteInterner()
        scenes = []
        prev_state = None
        if prev_path:
            path = prev_path
            prev_state = load_state(prev_path).to_parent_state(interner)
            scenes = reconcile([], prev_state)
        path = next_path
        next_state = load_state(next_path).to_parent_state(interner)
        prev_scenes = scenes
        scenes = reconcile(prev_scenes, next_state, prev_state)
    except FileNotFoundError:
        fail(f"State file not found: {path}", json_output, path=path)
        raise typer.Exit(2)
    except (TraceError, InvalidStateError, ReconcileError) as e:
        fail(str(e), json_output)
        raise typer.Exit(2)

    # Scenes handed back as the very objects of the previous tree
    kept = {id(s) for s in prev_scenes}
    reused = [s.key for s in scenes if id(s) in kept]

    if json_output:
        output = {
            "scenes": scenes_to_dicts(scenes),
            "reused": reused,
            "changed": scenes is not prev_scenes,
            "digest": scenes_digest(scenes),
        }
        print(json.dumps(output, indent=2))
    else:
        console.print(scenes_table(scenes))
        console.print(f"  Reused: [cyan]{len(reused)}[/cyan] of {len(scenes)}")
        console.print(f"  Digest: [yellow]{scenes_digest(scenes)}[/yellow]")
