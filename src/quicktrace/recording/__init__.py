"""Recording subpackage: snapshot models and the trace recorder."""

from quicktrace.recording.models import Highlight, Snapshot, StepEvent, Trace
from quicktrace.recording.recorder import TraceRecorder

__all__ = [
    "Highlight",
    "Snapshot",
    "StepEvent",
    "Trace",
    "TraceRecorder",
]
