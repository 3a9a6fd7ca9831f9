"""Shared behaviour: appending "Bar", licences and combined capabilities."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value: object) -> object:
    """Append "Bar" to a string or a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _append_bar_str(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _append_bar_list(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Return True when both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    def some_function(self) -> bool:
        return True


class OtherTrait:
    def other_function(self) -> bool:
        return True


@dataclass
class SomeStruct(SomeTrait, OtherTrait):
    name: str


def some_func(item: SomeTrait) -> bool:
    """Require both capabilities of ``item``."""
    return item.some_function() and item.other_function()