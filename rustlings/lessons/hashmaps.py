"""Dictionaries: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
from dataclasses import dataclass


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and at least five fruits."""
    basket = {"banana": 2}
    basket["apple"] = 3
    basket["mango"] = 1
    return basket


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind not yet present, leaving present ones alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(digits)
    if value > 255:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals scored and conceded from ``a,b,goals_a,goals_b`` lines."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])

        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        team_1.goals_scored += team_1_score
        team_1.goals_conceded += team_2_score

        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        team_2.goals_scored += team_2_score
        team_2.goals_conceded += team_1_score
    return scores