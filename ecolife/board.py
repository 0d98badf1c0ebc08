"""Board - fixed-size grid of fields with occupancy queries and directional search."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Callable, Iterable

from ecolife.types import BoardError, Vector2

if TYPE_CHECKING:
    from ecolife.animals import Animal, Sex, Species

FieldPredicate = Callable[["Field"], bool]


class Field:
    """A single cell: a fixed position and at most one occupying animal."""

    __slots__ = ("_position", "occupant")

    def __init__(self, position: Vector2, occupant: Animal | None = None) -> None:
        self._position = position
        self.occupant = occupant

    @property
    def position(self) -> Vector2:
        return self._position

    @property
    def is_empty(self) -> bool:
        return self.occupant is None

    def __repr__(self) -> str:
        return f"Field(({self._position.x}, {self._position.y}), {self.occupant!r})"


class Board:
    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        # Row-major insertion order: all_fields() yields top-to-bottom, left-to-right.
        self._fields: dict[Vector2, Field] = {}
        for y in range(height):
            for x in range(width):
                pos = Vector2(x, y)
                self._fields[pos] = Field(pos)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def field_at(self, position: Vector2) -> Field | None:
        return self._fields.get(position)

    def place(self, animal: Animal, position: Vector2) -> Field:
        field = self.field_at(position)
        if field is None:
            raise BoardError(
                f"({position.x}, {position.y}) out of bounds for "
                f"{self._width}x{self._height} board"
            )
        if field.occupant is not None:
            raise BoardError(
                f"({position.x}, {position.y}) is already occupied by {field.occupant!r}"
            )
        field.occupant = animal
        return field

    # --- Snapshots ---
    # Every query returns a fresh list, so callers may mutate occupancy while
    # iterating the result.

    def all_fields(self) -> list[Field]:
        return list(self._fields.values())

    def animal_fields(self) -> list[Field]:
        return [f for f in self._fields.values() if f.occupant is not None]

    def female_fields(self) -> list[Field]:
        return [
            f for f in self._fields.values()
            if f.occupant is not None and f.occupant.is_female
        ]

    def male_fields(self) -> list[Field]:
        return [
            f for f in self._fields.values()
            if f.occupant is not None and f.occupant.is_male
        ]

    def edible_fields(self) -> list[Field]:
        return [
            f for f in self._fields.values()
            if f.occupant is not None and f.occupant.is_edible
        ]

    def occupied_count(self) -> int:
        return sum(1 for f in self._fields.values() if f.occupant is not None)

    def census(self) -> Counter[tuple[Species, Sex]]:
        return Counter(
            (f.occupant.species, f.occupant.sex)
            for f in self._fields.values()
            if f.occupant is not None
        )

    # --- Directional search ---

    def first_relative_field_where(
        self,
        reference: Vector2,
        search_order: Iterable[Vector2],
        predicate: FieldPredicate,
    ) -> Field | None:
        """Return the first neighbour of *reference* satisfying *predicate*.

        Directions are tried in *search_order*; positions that fall off the
        board are skipped. Returns None when no direction qualifies.
        """
        for direction in search_order:
            field = self._fields.get(reference + direction)
            if field is not None and predicate(field):
                return field
        return None
