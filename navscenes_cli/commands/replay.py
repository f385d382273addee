"""
Replay command: Replay a navigation trace and show each step
"""

import json
from typing import Optional

import typer
from rich.table import Table

from navscenes.core.canonical import scenes_to_dicts
from navscenes.core.errors import InvalidStateError, ReconcileError, TraceError
from navscenes.replay import replay as replay_steps
from navscenes.trace import load_trace

from ._output import console, fail, scenes_table


def replay_command(
    trace_path: str = typer.Option(
        "navigation-trace.jsonl",
        "--trace",
        "-t",
        envvar="NAVSCENES_TRACE",
        help="Path to JSONL navigation trace",
    ),
    until: Optional[int] = typer.Option(None, "--until", "-u", help="Replay until step number (inclusive)"),
    show_scenes: bool = typer.Option(False, "--show-scenes", "-s", help="Show final scenes"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay a navigation trace through the scene reconciler.

    Examples:
        navscenes replay --trace trace.jsonl
        navscenes replay --until 3 --show-scenes
        navscenes replay --json
    """
    try:
        steps = load_trace(trace_path)
        result = replay_steps(steps, to_step=until, trace_id=trace_path)
    except FileNotFoundError:
        fail(f"Trace file not found: {trace_path}", json_output, path=trace_path)
        raise typer.Exit(2)
    except (TraceError, InvalidStateError, ReconcileError) as e:
        fail(str(e), json_output)
        raise typer.Exit(2)

    if json_output:
        output = {
            "success": True,
            "steps_replayed": result.applied,
            "digest": result.digest,
            "steps": [
                {
                    "step": rec.step,
                    "scenes": len(rec.scenes),
                    "stale": rec.stale_count,
                    "active": rec.active_key,
                    "changed": rec.changed,
                    "retired": rec.retired,
                    "digest": rec.digest,
                }
                for rec in result.history
            ],
        }
        if show_scenes:
            output["scenes"] = scenes_to_dicts(result.scenes)
        print(json.dumps(output, indent=2))
        return

    console.print(f"[green]✓ Replayed {result.applied} steps successfully[/green]")
    console.print(f"  Final digest: [yellow]{result.digest}[/yellow]")

    table = Table(title="Steps")
    table.add_column("Step", style="cyan", justify="right")
    table.add_column("Scenes", justify="right")
    table.add_column("Stale", style="yellow", justify="right")
    table.add_column("Active", style="green")
    table.add_column("Changed", justify="center")
    table.add_column("Digest (prefix)", style="dim")

    for rec in result.history:
        table.add_row(
            str(rec.step),
            str(len(rec.scenes)),
            str(rec.stale_count),
            rec.active_key or "-",
            "yes" if rec.changed else "no",
            rec.digest[:12],
        )

    console.print(table)

    if show_scenes:
        console.print(scenes_table(result.scenes, title="Final Scenes"))
