"""Quizzes on functions, strings and generic report cards."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable


def calculate_price_of_apples(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return quantity if quantity > 40 else quantity * 2


class CommandKind(enum.Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A transformation; ``times`` is used only by APPEND."""

    kind: CommandKind
    times: int = 0


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    output = []
    for text, command in items:
        match command.kind:
            case CommandKind.UPPERCASE:
                output.append(text.upper())
            case CommandKind.TRIM:
                output.append(text.strip())
            case CommandKind.APPEND:
                output.append(text + "bar" * command.times)
    return output


@dataclass
class ReportCard:
    """A report card whose grade may be numeric or alphabetical."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"