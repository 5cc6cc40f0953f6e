"""quicktrace show -- render a single step of a trace."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from quicktrace.cli.common import load_config_or_exit, open_session_or_exit, print_error
from quicktrace.cli.output import render_snapshot


def show(
    values: Optional[str] = typer.Argument(
        None, help="Comma-separated numbers (default: random array)"
    ),
    step: int = typer.Option(1, "--step", "-s", help="1-based step number to show"),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for array generation and pivot choice"
    ),
    height: Optional[int] = typer.Option(
        None, "--height", min=1, help="Rows used by the tallest bar"
    ),
) -> None:
    """Render one snapshot of the trace as bars."""
    console = Console()
    config = load_config_or_exit(console)
    session = open_session_or_exit(values, config, seed, console)

    total = len(session.trace)
    snapshot = session.trace.get(step - 1)
    if snapshot is None:
        print_error(console, f"Step {step} is out of range (1-{total}).")
        raise typer.Exit(code=1)

    session.seek(step - 1)
    render_snapshot(
        snapshot,
        console,
        session.cursor,
        total,
        max_height=height or config.bar_height,
    )
