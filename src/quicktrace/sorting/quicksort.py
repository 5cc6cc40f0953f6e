"""Randomized quicksort instrumented to record a replayable trace.

Snapshots are taken at every observable event, in this order within a
partition of ``[low, high]``:

1. pivot chosen at a random index (pivot highlighted where it stands)
2. before each comparison of ``arr[j]`` with the pivot (pivot at ``high``)
3. after each swap that grows the "smaller than pivot" region
4. after the pivot is placed in its final position (no highlight)

The run is bracketed by the untouched input and the sorted result.
Elements equal to the pivot are never swapped during the scan (strict
``<``) and end up to its right.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any

from quicktrace.logs import get_logger
from quicktrace.recording.models import Highlight, Number, StepEvent, Trace
from quicktrace.recording.recorder import TraceRecorder
from quicktrace.sorting.validation import validate_values

logger = get_logger(__name__)


class QuickSortTracer:
    """Runs randomized quicksort on a working copy while recording.

    Args:
        rng: Source of pivot choices. Defaults to the process-wide
            ``random`` module; pass a seeded ``random.Random`` for
            reproducible traces.
        recorder: Recorder to write into. Reset at the start of every
            run. A fresh one is created when omitted.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        recorder: TraceRecorder | None = None,
    ) -> None:
        self.rng = rng
        self.recorder = recorder if recorder is not None else TraceRecorder()
        self._arr: list[Number] = []

    def sort(self, values: Iterable[Any]) -> Trace:
        """Sort ``values`` and return the recorded trace.

        The caller's sequence is never modified.

        Raises:
            InvalidInputError: Before anything is recorded, if an entry
                is not a finite number.
        """
        working = validate_values(values)

        self.recorder.reset()
        self._arr = working
        self.recorder.record(self._arr, event=StepEvent.initial)

        self._quicksort(0, len(self._arr) - 1)

        self.recorder.record(
            self._arr, Highlight(sorted=True), event=StepEvent.sorted
        )
        trace = self.recorder.to_trace()
        logger.info(
            "Sorted %d values in %d steps (%d comparisons, %d swaps)",
            len(self._arr),
            len(trace),
            trace.comparisons,
            trace.swaps,
        )
        return trace

    def _quicksort(self, low: int, high: int) -> None:
        # Explicit stack instead of recursion; popping the left range
        # first keeps the same event order as the recursive form.
        pending: list[tuple[int, int]] = [(low, high)]
        while pending:
            low, high = pending.pop()
            if low >= high:
                continue
            pivot_index = self._partition(low, high)
            pending.append((pivot_index + 1, high))
            pending.append((low, pivot_index - 1))

    def _partition(self, low: int, high: int) -> int:
        arr = self._arr
        random_index = self._choose_pivot(low, high)
        logger.debug("Partition [%d, %d] pivot index %d", low, high, random_index)
        self.recorder.record(
            arr, Highlight(pivot_index=random_index), event=StepEvent.pivot_chosen
        )

        self._swap(random_index, high)
        pivot = arr[high]

        i = low - 1
        for j in range(low, high):
            self.recorder.record(
                arr,
                Highlight(pivot_index=high, compare_index=j),
                event=StepEvent.compare,
            )
            if arr[j] < pivot:
                i += 1
                self._swap(i, j)
                self.recorder.record(
                    arr, Highlight(pivot_index=high), event=StepEvent.swap
                )

        self._swap(i + 1, high)
        self.recorder.record(arr, event=StepEvent.pivot_placed)
        return i + 1

    def _choose_pivot(self, low: int, high: int) -> int:
        if self.rng is None:
            return random.randint(low, high)
        return self.rng.randint(low, high)

    def _swap(self, a: int, b: int) -> None:
        arr = self._arr
        arr[a], arr[b] = arr[b], arr[a]


def sort(values: Iterable[Any], rng: random.Random | None = None) -> Trace:
    """Sort ``values`` with randomized quicksort and return its trace.

    The first snapshot is the input with no highlight; the last is the
    sorted array with ``highlight.sorted`` set.

    Raises:
        InvalidInputError: If any entry is not a finite number. Nothing
            is recorded in that case.
    """
    return QuickSortTracer(rng=rng).sort(values)
