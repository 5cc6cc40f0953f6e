"""quicktrace play -- animate a trace in the terminal.

Redraws the bars for each snapshot at a fixed interval until the
sorted state is reached. Ctrl-C stops playback.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from quicktrace.cli.common import load_config_or_exit, open_session_or_exit, print_error
from quicktrace.cli.output import render_snapshot
from quicktrace.playback.autoplay import AutoPlayer
from quicktrace.recording.models import Snapshot


def play(
    values: Optional[str] = typer.Argument(
        None, help="Comma-separated numbers (default: random array)"
    ),
    speed: Optional[int] = typer.Option(
        None, "--speed", min=0, help="Milliseconds between steps"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for array generation and pivot choice"
    ),
    height: Optional[int] = typer.Option(
        None, "--height", min=1, help="Rows used by the tallest bar"
    ),
    start: int = typer.Option(1, "--from", min=1, help="1-based step to start from"),
) -> None:
    """Play back every step of randomized quicksort."""
    console = Console()
    config = load_config_or_exit(console)
    session = open_session_or_exit(values, config, seed, console)

    total = len(session.trace)
    if start > total:
        print_error(console, f"Step {start} is out of range (1-{total}).")
        raise typer.Exit(code=1)
    session.seek(start - 1)

    max_height = height or config.bar_height
    interval = speed if speed is not None else config.speed_ms

    def on_step(snapshot: Snapshot, index: int) -> None:
        if console.is_terminal:
            console.clear()
        render_snapshot(snapshot, console, index, total, max_height=max_height)

    player = AutoPlayer(session, interval_ms=interval)
    try:
        player.play(on_step)
    except KeyboardInterrupt:
        player.stop()
        console.print(f"\n[dim]Stopped at step {session.cursor + 1}/{total}.[/dim]")
