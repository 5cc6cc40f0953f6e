"""Shared plumbing for quicktrace CLI commands.

Loads configuration, builds the random source and opens a session,
turning user errors into a red message and exit code 1.
"""

from __future__ import annotations

import random

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from quicktrace.loader.parser import resolve_values
from quicktrace.logs import configure_logging
from quicktrace.models.config import (
    CONFIG_FILENAME,
    ProjectConfig,
    find_project_root,
    load_project_config,
)
from quicktrace.session import SortSession
from quicktrace.sorting.errors import InvalidInputError


def print_error(console: Console, message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def load_config_or_exit(console: Console) -> ProjectConfig:
    """Load quicktrace.yaml and configure logging from it."""
    project_root = find_project_root()
    try:
        config = load_project_config(project_root)
    except (yaml.YAMLError, ValidationError) as exc:
        print_error(console, f"Invalid {CONFIG_FILENAME}: {exc}")
        raise typer.Exit(code=1)
    configure_logging(config.log_level)
    return config


def make_rng(seed: int | None) -> random.Random | None:
    """Seeded generator, or None to use the process-wide source."""
    if seed is None:
        return None
    return random.Random(seed)


def open_session_or_exit(
    values: str | None,
    config: ProjectConfig,
    seed: int | None,
    console: Console,
) -> SortSession:
    """Parse or generate the array, sort it, and open a session.

    The same generator drives array generation and pivot choice, so a
    seed reproduces the whole run.
    """
    rng = make_rng(seed if seed is not None else config.seed)
    try:
        array = resolve_values(values, config, rng)
        return SortSession.from_values(array, rng=rng)
    except InvalidInputError as exc:
        print_error(console, str(exc))
        console.print("[dim]Enter valid numbers separated by commas.[/dim]")
        raise typer.Exit(code=1)
