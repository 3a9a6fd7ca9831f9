"""Functions, conditionals, generics and vectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Double every element."""
    result = []
    for value in values:
        result.append(value * 2)
    return result


def vec_map(values: Iterable[int]) -> list[int]:
    """Double every element by mapping."""
    return list(map(lambda num: num * 2, values))