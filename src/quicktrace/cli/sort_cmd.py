"""quicktrace sort -- run the sort once and summarize its trace."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from quicktrace.cli.common import load_config_or_exit, open_session_or_exit
from quicktrace.cli.output import output_json, render_summary


def sort(
    values: Optional[str] = typer.Argument(
        None, help="Comma-separated numbers (default: random array)"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for array generation and pivot choice"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Print every snapshot as JSON"
    ),
) -> None:
    """Sort an array and print a summary of the recorded trace."""
    console = Console()
    config = load_config_or_exit(console)
    session = open_session_or_exit(values, config, seed, console)

    if json_output:
        output_json(session.trace)
        return

    render_summary(session.trace, console)
