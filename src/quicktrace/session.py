"""SortSession pairing one finished trace with a playback cursor.

The session is handed explicitly to whatever displays the trace. The
trace itself is never mutated; only the cursor moves, and it always
stays within ``[0, len(trace) - 1]``.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any

from quicktrace.logs import get_logger
from quicktrace.recording.models import Snapshot, Trace
from quicktrace.sorting.quicksort import sort

logger = get_logger(__name__)


class SortSession:
    """Owns a Trace and the index of the snapshot being displayed."""

    def __init__(self, trace: Trace) -> None:
        if len(trace) == 0:
            raise ValueError("Cannot open a session on an empty trace")
        self.trace = trace
        self._cursor = 0

    @classmethod
    def from_values(
        cls, values: Iterable[Any], rng: random.Random | None = None
    ) -> "SortSession":
        """Sort ``values`` and open a session on the resulting trace."""
        return cls(sort(values, rng=rng))

    def load(self, values: Iterable[Any], rng: random.Random | None = None) -> Trace:
        """Replace the trace with a fresh run over ``values`` and rewind.

        The current trace is kept if ``values`` is rejected.
        """
        trace = sort(values, rng=rng)
        self.trace = trace
        self._cursor = 0
        logger.info("Loaded trace with %d snapshots", len(trace))
        return trace

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def last_index(self) -> int:
        return len(self.trace) - 1

    @property
    def at_start(self) -> bool:
        return self._cursor == 0

    @property
    def at_end(self) -> bool:
        return self._cursor == self.last_index

    def current(self) -> Snapshot:
        return self.trace.snapshots[self._cursor]

    def step_forward(self) -> bool:
        """Advance one snapshot. Returns False if already at the end."""
        if self.at_end:
            return False
        self._cursor += 1
        return True

    def step_back(self) -> bool:
        """Go back one snapshot. Returns False if already at the start."""
        if self.at_start:
            return False
        self._cursor -= 1
        return True

    def seek(self, index: int) -> int:
        """Move to ``index``, clamped into range. Returns the new cursor."""
        self._cursor = max(0, min(index, self.last_index))
        return self._cursor

    def rewind(self) -> None:
        self._cursor = 0
