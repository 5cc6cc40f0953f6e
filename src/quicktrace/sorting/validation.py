"""Precondition checks for sorter input."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from quicktrace.recording.models import Number
from quicktrace.sorting.errors import InvalidInputError


def is_valid_number(value: Any) -> bool:
    """True for ints and finite floats.

    Booleans are not numbers here, and other numeric types (Fraction,
    Decimal) are rejected because snapshots store only ints and floats.
    Ints of any size are finite.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    return False


def validate_values(values: Iterable[Any]) -> list[Number]:
    """Return a working copy of ``values`` after checking every entry.

    Raises:
        InvalidInputError: If ``values`` is not iterable, is a string,
            or holds an entry that is not an int or a finite float.
    """
    if isinstance(values, (str, bytes)):
        raise InvalidInputError(
            "Expected a sequence of numbers, got a string. Parse it first.",
            value=values,
        )
    try:
        working = list(values)
    except TypeError as exc:
        raise InvalidInputError(
            f"Expected a sequence of numbers, got {type(values).__name__}",
            value=values,
        ) from exc

    for index, value in enumerate(working):
        if not is_valid_number(value):
            raise InvalidInputError(
                f"Entry {index} is not an int or a finite float: {value!r}",
                index=index,
                value=value,
            )
    return working
