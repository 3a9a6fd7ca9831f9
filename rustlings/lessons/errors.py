"""Error handling: validated name tags, parsed costs and positive integers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

I32_RANGE = (-(2**31), 2**31 - 1)
I64_RANGE = (-(2**63), 2**63 - 1)


class _ParseIntError(ValueError):
    """Text could not be read as an integer."""


def _parse_int(text: str, bounds: tuple[int, int]) -> int:
    """Parse a signed decimal integer strictly: an optional sign and ASCII digits."""
    if text == "":
        raise _ParseIntError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise _ParseIntError("invalid digit found in string")
    value = int(text)
    low, high = bounds
    if value > high:
        raise _ParseIntError("number too large to fit in target type")
    if value < low:
        raise _ParseIntError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost of buying the typed quantity: 5 tokens per item plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    quantity = _parse_int(item_quantity, I32_RANGE)
    return quantity * cost_per_item + processing_fee


class CreationErrorKind(enum.Enum):
    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(Exception):
    """A PositiveNonzeroInteger could not be created."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


class ParsePosNonzeroError(Exception):
    """Parsing failed; ``error`` is the CreationError or the integer parse error."""

    def __init__(self, error: Exception) -> None:
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    value: int

    @classmethod
    def new(cls, value: int) -> "PositiveNonzeroInteger":
        """Return the wrapped value; raise CreationError unless it is positive."""
        if value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if value == 0:
            raise CreationError(CreationErrorKind.ZERO)
        return cls(value)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError."""
    try:
        value = _parse_int(text, I64_RANGE)
    except _ParseIntError as error:
        raise ParsePosNonzeroError(error) from error
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as error:
        raise ParsePosNonzeroError(error) from error