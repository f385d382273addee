"""
Shared rendering for CLI commands.
"""

import json
from typing import Any, Sequence

from rich.console import Console
from rich.table import Table

from navscenes.core.scene import Scene

console = Console()


def scenes_table(scenes: Sequence[Scene], title: str = "Scenes") -> Table:
    table = Table(title=title)
    table.add_column("Key", style="green")
    table.add_column("Index", style="cyan", justify="right")
    table.add_column("Active", justify="center")
    table.add_column("Stale", justify="center")
    table.add_column("Route", style="dim")

    for scene in scenes:
        table.add_row(
            scene.key,
            str(scene.index),
            "[bold green]●[/bold green]" if scene.is_active else "",
            "[yellow]stale[/yellow]" if scene.is_stale else "",
            scene.navigation_state.key,
        )
    return table


def fail(message: str, json_output: bool, **extra: Any) -> None:
    """Report a command failure on stdout (JSON) or the console (rich)."""
    if json_output:
        print(json.dumps({"error": message, **extra}))
    else:
        console.print(f"[red]Error:[/red] {message}")
