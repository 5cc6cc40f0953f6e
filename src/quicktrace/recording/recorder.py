"""TraceRecorder accumulating snapshots during a sort run.

The recorder is the only writer of a trace. Each record() call copies
the live array, so later in-place mutation by the sorter never reaches
snapshots that were already taken.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from quicktrace.recording.models import Highlight, Number, Snapshot, StepEvent, Trace


class TraceRecorder:
    """Append-only log of array snapshots.

    Supports reset, append, indexed read and length. Call to_trace()
    to freeze the log into a Trace once the run is finished.
    """

    def __init__(self) -> None:
        self._snapshots: list[Snapshot] = []

    def reset(self) -> None:
        """Drop every recorded snapshot."""
        self._snapshots.clear()

    def record(
        self,
        values: Sequence[Number],
        highlight: Highlight | Mapping[str, Any] | None = None,
        event: StepEvent = StepEvent.initial,
    ) -> Snapshot:
        """Append a snapshot built from a copy of ``values``.

        Args:
            values: The live array. Copied, never referenced.
            highlight: A Highlight, a mapping of its fields, or None
                for an empty highlight.
            event: The algorithmic moment being recorded.

        Returns:
            The stored Snapshot.
        """
        if highlight is None:
            highlight = Highlight()
        elif not isinstance(highlight, Highlight):
            highlight = Highlight.model_validate(dict(highlight))

        snapshot = Snapshot(values=tuple(values), highlight=highlight, event=event)
        self._snapshots.append(snapshot)
        return snapshot

    def get(self, index: int) -> Snapshot | None:
        """Return the snapshot at ``index``, or None outside [0, length)."""
        if 0 <= index < len(self._snapshots):
            return self._snapshots[index]
        return None

    def length(self) -> int:
        return len(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def to_trace(self) -> Trace:
        """Freeze the recorded snapshots into an immutable Trace."""
        return Trace(snapshots=tuple(self._snapshots))
