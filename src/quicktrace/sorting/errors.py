"""Errors raised by the instrumented sorter and its input parser."""

from __future__ import annotations

from typing import Any


class InvalidInputError(ValueError):
    """Raised when input contains a non-numeric or non-finite entry.

    Raised before anything is recorded, so the trace stays empty.

    Attributes:
        index: Position of the first offending entry, or None when the
            input as a whole is unusable.
        value: The offending entry itself.
    """

    def __init__(self, message: str, index: int | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.index = index
        self.value = value
