"""Optional values."""

from __future__ import annotations


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at a 24-hour time; None for an invalid hour."""
    if time_of_day > 24:
        return None
    return 5 if time_of_day < 22 else 0