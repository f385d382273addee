#!/usr/bin/env python3
"""
navscenes CLI - Navigation Scene Reconciliation

Main entrypoint for the navscenes command-line tool.
"""

import sys
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from navscenes.logging_config import setup_logging
from navscenes_cli.commands import reconcile, replay

app = typer.Typer(
    name="navscenes",
    help="Navigation scene reconciliation CLI",
    add_completion=False,
)

console = Console()

app.command(name="reconcile")(reconcile.reconcile_command)
app.command(name="replay")(replay.replay_command)


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (overrides NAVSCENES_LOG_LEVEL)"
    ),
    log_format: Optional[str] = typer.Option(
        None, "--log-format", help="json or text (overrides NAVSCENES_LOG_FORMAT)"
    ),
):
    # stdout is reserved for command output
    setup_logging(level=log_level, fmt=log_format, stream=sys.stderr)


@app.command()
def version():
    """Show version information."""
    from navscenes import __version__ as engine_version
    from navscenes_cli import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]navscenes CLI[/bold]", f"v{__version__}")
    table.add_row("Reconciler", f"v{engine_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
