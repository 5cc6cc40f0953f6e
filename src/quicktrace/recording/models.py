"""Pydantic models for recorded sort traces.

A Trace is the finished, read-only output of one sort run: an ordered
tuple of Snapshots, each a frozen copy of the array plus what the
renderer should highlight at that moment.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

Number = int | float


class StepEvent(str, Enum):
    """Algorithmic moment a snapshot was taken at."""

    initial = "initial"
    pivot_chosen = "pivot_chosen"
    compare = "compare"
    swap = "swap"
    pivot_placed = "pivot_placed"
    sorted = "sorted"


class Highlight(BaseModel):
    """Which elements a renderer should emphasize in a snapshot.

    ``sorted`` is a trace-level flag: it is only set on the final
    snapshot and applies to every element at once.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    pivot_index: int | None = None
    compare_index: int | None = None
    sorted: bool = False

    @property
    def is_empty(self) -> bool:
        return self.pivot_index is None and self.compare_index is None and not self.sorted

    def as_dict(self) -> dict[str, Any]:
        """Return the wire shape, omitting absent keys."""
        shape: dict[str, Any] = {}
        if self.pivot_index is not None:
            shape["pivotIndex"] = self.pivot_index
        if self.compare_index is not None:
            shape["compareIndex"] = self.compare_index
        if self.sorted:
            shape["sorted"] = True
        return shape


class Snapshot(BaseModel):
    """The array's state at one instant plus its highlight descriptor."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    values: tuple[Number, ...]
    highlight: Highlight = Highlight()
    event: StepEvent = StepEvent.initial

    def as_dict(self) -> dict[str, Any]:
        return {"values": list(self.values), "highlight": self.highlight.as_dict()}


class Trace(BaseModel):
    """Chronological, immutable sequence of snapshots from one sort run.

    Safe to share between any number of readers once built.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    snapshots: tuple[Snapshot, ...] = ()

    def get(self, index: int) -> Snapshot | None:
        """Return the snapshot at ``index``, or None if out of range.

        Negative indices are treated as out of range rather than
        counting from the end.
        """
        if 0 <= index < len(self.snapshots):
            return self.snapshots[index]
        return None

    def length(self) -> int:
        return len(self.snapshots)

    def __len__(self) -> int:
        return len(self.snapshots)

    @property
    def first(self) -> Snapshot | None:
        return self.get(0)

    @property
    def last(self) -> Snapshot | None:
        return self.get(len(self.snapshots) - 1)

    def count(self, event: StepEvent) -> int:
        """Count snapshots recorded for a given event."""
        return sum(1 for snap in self.snapshots if snap.event == event)

    @property
    def comparisons(self) -> int:
        return self.count(StepEvent.compare)

    @property
    def swaps(self) -> int:
        return self.count(StepEvent.swap)
