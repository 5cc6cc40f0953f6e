"""Instrumented randomized quicksort and its input checks."""

from quicktrace.sorting.errors import InvalidInputError
from quicktrace.sorting.quicksort import QuickSortTracer, sort
from quicktrace.sorting.validation import is_valid_number, validate_values

__all__ = [
    "InvalidInputError",
    "QuickSortTracer",
    "is_valid_number",
    "sort",
    "validate_values",
]
