"""quicktrace: step-by-step randomized quicksort traces for teaching."""

__version__ = "0.1.0"

from quicktrace.recording.models import Highlight, Snapshot, StepEvent, Trace
from quicktrace.sorting.errors import InvalidInputError
from quicktrace.sorting.quicksort import sort

__all__ = [
    "Highlight",
    "InvalidInputError",
    "Snapshot",
    "StepEvent",
    "Trace",
    "__version__",
    "sort",
]
