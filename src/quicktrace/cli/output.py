"""Rich terminal rendering for sort traces.

Maps snapshots onto vertical bars (pivot red, compared element yellow,
everything green once sorted), plus a summary table and JSON output.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from fractions import Fraction

from rich import box
from rich.console import Console, Group
from rich.table import Table
from rich.text import Text

from quicktrace.recording.models import Number, Snapshot, StepEvent, Trace

BAR_CHAR = "█"

# Bar style by role; pivot wins over compare when both apply.
STYLE_DEFAULT = "steel_blue1"
STYLE_PIVOT = "bold red"
STYLE_COMPARE = "bold yellow"
STYLE_SORTED = "bold green"


def bar_heights(values: Sequence[Number], max_height: int) -> list[int]:
    """Scale values to whole rows against the largest absolute value.

    Any non-zero value gets at least one row so it stays visible.
    """
    if not values:
        return []
    peak = max(abs(v) for v in values)
    if peak == 0:
        return [0 for _ in values]
    heights = []
    for v in values:
        if v == 0:
            heights.append(0)
        else:
            heights.append(max(1, round(Fraction(abs(v)) / Fraction(peak) * max_height)))
    return heights


def bar_style(snapshot: Snapshot, index: int) -> str:
    """Return the Rich style for the bar at ``index``."""
    highlight = snapshot.highlight
    if highlight.sorted:
        return STYLE_SORTED
    if index == highlight.pivot_index:
        return STYLE_PIVOT
    if index == highlight.compare_index:
        return STYLE_COMPARE
    return STYLE_DEFAULT


def _format_value(value: Number) -> str:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return str(value)


def describe_step(snapshot: Snapshot) -> str:
    """One-line plain English account of what a snapshot shows."""
    values = snapshot.values
    pivot = snapshot.highlight.pivot_index
    compare = snapshot.highlight.compare_index

    if snapshot.event == StepEvent.pivot_chosen and pivot is not None:
        return f"Pick random pivot {_format_value(values[pivot])} at index {pivot}"
    if snapshot.event == StepEvent.compare and pivot is not None and compare is not None:
        return (
            f"Compare {_format_value(values[compare])} at index {compare} "
            f"with pivot {_format_value(values[pivot])}"
        )
    if snapshot.event == StepEvent.swap:
        return "Move smaller element left of the boundary"
    if snapshot.event == StepEvent.pivot_placed:
        return "Place pivot in its final position"
    if snapshot.event == StepEvent.sorted:
        return "Sorted"
    return "Initial array"


def build_bars(snapshot: Snapshot, max_height: int = 10) -> Text:
    """Draw a snapshot as columns of bars with value labels underneath."""
    labels = [_format_value(v) for v in snapshot.values]
    width = max([3] + [len(label) for label in labels])
    heights = bar_heights(snapshot.values, max_height)
    styles = [bar_style(snapshot, i) for i in range(len(labels))]

    text = Text()
    for row in range(max_height, 0, -1):
        for i, height in enumerate(heights):
            cell = BAR_CHAR * width if height >= row else " " * width
            text.append(cell, style=styles[i])
            text.append(" ")
        text.append("\n")
    for i, label in enumerate(labels):
        text.append(label.rjust(width), style=styles[i])
        text.append(" ")
    return text


def render_snapshot(
    snapshot: Snapshot,
    console: Console,
    index: int,
    total: int,
    max_height: int = 10,
) -> None:
    """Print a snapshot with its step counter and description."""
    header = Text()
    header.append(f"Step {index + 1}/{total}", style="bold cyan")
    header.append("  ")
    header.append(describe_step(snapshot))
    console.print(Group(header, build_bars(snapshot, max_height)))


def render_summary(trace: Trace, console: Console) -> None:
    """Print a key-value table describing a finished trace."""
    first = trace.first
    last = trace.last

    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Value")

    if first is not None:
        table.add_row("Input", ", ".join(_format_value(v) for v in first.values) or "-")
    if last is not None:
        table.add_row("Sorted", ", ".join(_format_value(v) for v in last.values) or "-")
    table.add_row("Steps", str(len(trace)))
    table.add_row("Partitions", str(trace.count(StepEvent.pivot_placed)))
    table.add_row("Comparisons", str(trace.comparisons))
    table.add_row("Swaps", str(trace.swaps))

    console.print()
    console.print(table)


def output_json(trace: Trace) -> None:
    """Write the trace as pure JSON to stdout, one object per snapshot."""
    steps = [
        {**snapshot.as_dict(), "event": snapshot.event.value}
        for snapshot in trace.snapshots
    ]
    sys.stdout.write(json.dumps(steps, indent=2))
    sys.stdout.write("\n")
