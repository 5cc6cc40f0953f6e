"""Turn user text into an array to sort, or generate one.

Mirrors the classic "Generate" button: a blank input produces a random
array, anything else must be comma-separated numbers.
"""

from __future__ import annotations

import random
import re
from typing import TYPE_CHECKING

from quicktrace.recording.models import Number
from quicktrace.sorting.errors import InvalidInputError
from quicktrace.sorting.validation import is_valid_number

if TYPE_CHECKING:
    from quicktrace.models.config import ProjectConfig

_INT_TOKEN = re.compile(r"[+-]?\d+(?:_\d+)*")


def _parse_token(token: str, index: int) -> Number:
    if _INT_TOKEN.fullmatch(token):
        try:
            return int(token)
        except ValueError as exc:
            raise InvalidInputError(
                f"Entry {index} has too many digits to read as an integer",
                index=index,
                value=token,
            ) from exc
    return float(token)


def parse_values(text: str) -> list[Number]:
    """Parse comma-separated numbers.

    Integers stay ints, everything else numeric becomes a float.

    Args:
        text: Input such as ``"3, 1, 2"``.

    Returns:
        The parsed numbers in input order.

    Raises:
        InvalidInputError: On an empty entry, a non-numeric entry, NaN,
            an infinity, or an integer with too many digits.
    """
    values: list[Number] = []
    for index, raw in enumerate(text.split(",")):
        token = raw.strip()
        if not token:
            raise InvalidInputError(
                f"Entry {index} is empty",
                index=index,
                value=raw,
            )
        try:
            value = _parse_token(token, index)
        except InvalidInputError:
            raise
        except ValueError as exc:
            raise InvalidInputError(
                f"Entry {index} is not a number: {token!r}",
                index=index,
                value=token,
            ) from exc
        if not is_valid_number(value):
            raise InvalidInputError(
                f"Entry {index} is not a finite number: {token!r}",
                index=index,
                value=token,
            )
        values.append(value)
    return values


def generate_values(
    size: int = 10,
    low: int = 1,
    high: int = 100,
    rng: random.Random | None = None,
) -> list[int]:
    """Generate ``size`` random integers in ``[low, high]``."""
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")
    source = rng if rng is not None else random
    return [source.randint(low, high) for _ in range(size)]


def resolve_values(
    text: str | None,
    config: "ProjectConfig",
    rng: random.Random | None = None,
) -> list[Number]:
    """Parse ``text``, or generate an array from config when it is blank."""
    if text is None or not text.strip():
        return list(
            generate_values(config.default_size, config.min_value, config.max_value, rng)
        )
    return parse_values(text)
