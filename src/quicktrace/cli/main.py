"""quicktrace CLI entry point."""

import typer

from quicktrace import __version__
from quicktrace.cli.browse_cmd import browse
from quicktrace.cli.play_cmd import play
from quicktrace.cli.show_cmd import show
from quicktrace.cli.sort_cmd import sort as sort_cmd

app = typer.Typer(
    name="quicktrace",
    help="Step-by-step randomized quicksort visualizer",
    no_args_is_help=True,
)

# Register subcommands
app.command()(browse)
app.command()(play)
app.command()(show)
app.command(name="sort")(sort_cmd)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"quicktrace {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Step-by-step randomized quicksort visualizer."""
