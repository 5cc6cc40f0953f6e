"""Tests for snapshot models and the trace recorder."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from quicktrace.recording.models import Highlight, Snapshot, StepEvent, Trace
from quicktrace.recording.recorder import TraceRecorder


class TestHighlight:
    def test_empty_by_default(self):
        highlight = Highlight()
        assert highlight.is_empty
        assert highlight.as_dict() == {}

    def test_as_dict_uses_wire_keys(self):
        highlight = Highlight(pivot_index=4, compare_index=1)
        assert highlight.as_dict() == {"pivotIndex": 4, "compareIndex": 1}

    def test_sorted_flag(self):
        highlight = Highlight(sorted=True)
        assert not highlight.is_empty
        assert highlight.as_dict() == {"sorted": True}

    def test_frozen(self):
        highlight = Highlight(pivot_index=0)
        with pytest.raises(ValidationError):
            highlight.pivot_index = 3

    def test_rejects_unknown_keys(self):
        with pytest.raises(ValidationError, match="extra_forbidden"):
            Highlight.model_validate({"pivot": 1})


class TestSnapshot:
    def test_as_dict(self):
        snap = Snapshot(values=(3, 1, 2), highlight=Highlight(pivot_index=2))
        assert snap.as_dict() == {"values": [3, 1, 2], "highlight": {"pivotIndex": 2}}

    def test_keeps_ints_and_floats(self):
        snap = Snapshot(values=(1, 2.5))
        assert isinstance(snap.values[0], int)
        assert isinstance(snap.values[1], float)

    def test_frozen(self):
        snap = Snapshot(values=(1,))
        with pytest.raises(ValidationError):
            snap.values = (2,)


class TestTrace:
    def _trace(self) -> Trace:
        return Trace(
            snapshots=(
                Snapshot(values=(2, 1)),
                Snapshot(
                    values=(2, 1),
                    highlight=Highlight(pivot_index=1, compare_index=0),
                    event=StepEvent.compare,
                ),
                Snapshot(values=(1, 2), highlight=Highlight(sorted=True), event=StepEvent.sorted),
            )
        )

    def test_get_in_range(self):
        trace = self._trace()
        assert trace.get(0).values == (2, 1)
        assert trace.get(2).highlight.sorted is True

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_get_out_of_range_returns_none(self, index):
        assert self._trace().get(index) is None

    def test_length(self):
        trace = self._trace()
        assert trace.length() == 3
        assert len(trace) == 3

    def test_first_and_last(self):
        trace = self._trace()
        assert trace.first.event == StepEvent.initial
        assert trace.last.event == StepEvent.sorted

    def test_empty_trace(self):
        trace = Trace()
        assert trace.length() == 0
        assert trace.first is None
        assert trace.last is None

    def test_counts(self):
        trace = self._trace()
        assert trace.comparisons == 1
        assert trace.swaps == 0
        assert trace.count(StepEvent.sorted) == 1


class TestTraceRecorder:
    def test_starts_empty(self):
        recorder = TraceRecorder()
        assert recorder.length() == 0
        assert recorder.get(0) is None

    def test_record_appends_in_order(self):
        recorder = TraceRecorder()
        recorder.record([1, 2])
        recorder.record([2, 1], Highlight(pivot_index=0), event=StepEvent.pivot_chosen)
        assert recorder.length() == 2
        assert recorder.get(0).values == (1, 2)
        assert recorder.get(1).highlight.pivot_index == 0
        assert recorder.get(1).event == StepEvent.pivot_chosen

    def test_record_defaults_to_empty_highlight(self):
        recorder = TraceRecorder()
        snap = recorder.record([5])
        assert snap.highlight.is_empty

    def test_record_copies_values(self):
        recorder = TraceRecorder()
        live = [3, 1, 2]
        recorder.record(live)
        live[0] = 99
        live.append(7)
        assert recorder.get(0).values == (3, 1, 2)

    def test_record_accepts_and_copies_mapping_highlight(self):
        recorder = TraceRecorder()
        highlight = {"pivot_index": 1, "compare_index": 0}
        recorder.record([1, 2], highlight)
        highlight["pivot_index"] = 0
        assert recorder.get(0).highlight.pivot_index == 1

    def test_reset_clears(self):
        recorder = TraceRecorder()
        recorder.record([1])
        recorder.record([1])
        recorder.reset()
        assert recorder.length() == 0
        assert len(recorder) == 0

    def test_get_negative_index_is_none(self):
        recorder = TraceRecorder()
        recorder.record([1])
        assert recorder.get(-1) is None

    def test_to_trace_is_independent_of_later_records(self):
        recorder = TraceRecorder()
        recorder.record([1])
        trace = recorder.to_trace()
        recorder.record([2])
        recorder.reset()
        assert trace.length() == 1
        assert trace.get(0).values == (1,)
