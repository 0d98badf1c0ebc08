"""Shared value types, turn context, and errors for the ecolife engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable


@dataclass(frozen=True, slots=True)
class Vector2:
    """Integer 2D coordinate. Doubles as an absolute position and a direction."""

    x: int
    y: int

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def shifted(self, dx: int, dy: int) -> Vector2:
        return Vector2(self.x + dx, self.y + dy)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.add(other)


UP = Vector2(0, -1)
DOWN = Vector2(0, 1)
LEFT = Vector2(-1, 0)
RIGHT = Vector2(1, 0)

# Clockwise from up.
CARDINAL_DIRECTIONS: tuple[Vector2, ...] = (UP, RIGHT, DOWN, LEFT)


@dataclass(frozen=True, slots=True)
class TurnContext:
    turn_number: int
    random: _random.Random


class EcolifeError(Exception):
    """Base class for every error raised by ecolife."""


class BoardParseError(EcolifeError, ValueError):
    """Raised when board input rows are empty, ragged, or contain unknown symbols."""

    def __init__(
        self, message: str, row: int | None = None, column: int | None = None
    ) -> None:
        self.row = row
        self.column = column
        super().__init__(message)


class BoardError(EcolifeError, ValueError):
    """Raised on an illegal placement (off-board or already occupied)."""


class LegendError(EcolifeError, LookupError):
    """Raised when an animal has no symbol in the legend."""


class UnknownAnimalError(EcolifeError, LookupError):
    """Raised when asked to create a species/sex combination with no traits."""


if TYPE_CHECKING:
    from ecolife.board import Board

TurnAction = Callable[["Board", TurnContext], None]
