"""Building a Person from text, with a default fallback or with errors."""

from __future__ import annotations

import enum
from dataclasses import dataclass

USIZE_MAX = 2**64 - 1


def _parse_usize(text: str) -> int:
    """Parse an unsigned decimal integer: an optional '+' and ASCII digits."""
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


class ParsePersonErrorKind(enum.Enum):
    """Why text could not be parsed into a Person."""

    EMPTY = "empty input string"
    BAD_LEN = "incorrect number of fields"
    NO_NAME = "empty name field"
    PARSE_INT = "invalid age"


class ParsePersonError(Exception):
    """Text could not be parsed into a Person."""

    def __init__(self, kind: ParsePersonErrorKind, cause: Exception | None = None) -> None:
        message = kind.value if cause is None else f"{kind.value}: {cause}"
        super().__init__(message)
        self.kind = kind
        self.cause = cause


@dataclass(frozen=True)
class Person:
    name: str
    age: int

    @classmethod
    def default(cls) -> "Person":
        """The fallback person: John, aged 30."""
        return cls(name="John", age=30)

    @classmethod
    def parse(cls, text: str) -> "Person":
        """Parse ``name,age``; raise ParsePersonError on any problem."""
        if not text:
            raise ParsePersonError(ParsePersonErrorKind.EMPTY)
        fields = text.split(",")
        if len(fields) != 2:
            raise ParsePersonError(ParsePersonErrorKind.BAD_LEN)
        name, age_text = fields
        if not name:
            raise ParsePersonError(ParsePersonErrorKind.NO_NAME)
        try:
            age = _parse_usize(age_text)
        except ValueError as error:
            raise ParsePersonError(ParsePersonErrorKind.PARSE_INT, error) from error
        return cls(name=name, age=age)

    @classmethod
    def from_str_or_default(cls, text: str) -> "Person":
        """Parse ``name,age``, falling back to the default person on any problem."""
        try:
            return cls.parse(text)
        except ParsePersonError:
            return cls.default()