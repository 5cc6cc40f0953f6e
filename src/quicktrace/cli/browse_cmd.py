"""quicktrace browse -- step through a trace by hand."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from quicktrace.cli.common import load_config_or_exit, open_session_or_exit
from quicktrace.cli.output import render_snapshot

_PROMPT = "[n]ext [p]rev [s]tart [e]nd [q]uit"


def browse(
    values: Optional[str] = typer.Argument(
        None, help="Comma-separated numbers (default: random array)"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for array generation and pivot choice"
    ),
    height: Optional[int] = typer.Option(
        None, "--height", min=1, help="Rows used by the tallest bar"
    ),
) -> None:
    """Step forward and backward through the trace interactively."""
    console = Console()
    config = load_config_or_exit(console)
    session = open_session_or_exit(values, config, seed, console)

    total = len(session.trace)
    max_height = height or config.bar_height

    while True:
        render_snapshot(
            session.current(), console, session.cursor, total, max_height=max_height
        )
        choice = typer.prompt(_PROMPT, default="n").strip().lower()

        if choice in ("q", "quit"):
            break
        if choice in ("n", "next"):
            if not session.step_forward():
                console.print("[dim]Already at the last step.[/dim]")
        elif choice in ("p", "prev"):
            if not session.step_back():
                console.print("[dim]Already at the first step.[/dim]")
        elif choice in ("s", "start"):
            session.rewind()
        elif choice in ("e", "end"):
            session.seek(session.last_index)
        else:
            console.print(f"[yellow]Unknown choice '{escape(choice)}'.[/yellow]")
