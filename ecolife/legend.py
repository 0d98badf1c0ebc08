"""Board legend - two-way mapping between animals and single-character symbols."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ecolife.animals import Animal, Sex, Species
from ecolife.types import LegendError

EMPTY_SYMBOL = "."


@dataclass(frozen=True)
class LegendKey:
    species: Species
    sex: Sex
    symbol: str


class BoardLegend:
    """Maps each (species, sex) pair to a symbol, plus one empty-cell symbol.

    Raises ValueError if a symbol is not a single character, is used twice,
    or collides with the empty symbol.
    """

    def __init__(self, keys: Iterable[LegendKey], empty_symbol: str = EMPTY_SYMBOL) -> None:
        if len(empty_symbol) != 1:
            raise ValueError(f"Empty symbol must be one character, got {empty_symbol!r}")
        self._empty_symbol = empty_symbol
        self._by_symbol: dict[str, LegendKey] = {}
        self._by_animal: dict[tuple[Species, Sex], LegendKey] = {}
        for key in keys:
            if len(key.symbol) != 1:
                raise ValueError(f"Legend symbol must be one character, got {key.symbol!r}")
            if key.symbol == empty_symbol:
                raise ValueError(f"Symbol {key.symbol!r} is reserved for empty fields")
            if key.symbol in self._by_symbol:
                raise ValueError(f"Symbol {key.symbol!r} is used more than once")
            if (key.species, key.sex) in self._by_animal:
                raise ValueError(
                    f"{key.sex.value} {key.species.value} has more than one symbol"
                )
            self._by_symbol[key.symbol] = key
            self._by_animal[(key.species, key.sex)] = key

    @property
    def empty_symbol(self) -> str:
        return self._empty_symbol

    def keys(self) -> list[LegendKey]:
        return list(self._by_symbol.values())

    def key_for_symbol(self, symbol: str) -> LegendKey | None:
        return self._by_symbol.get(symbol)

    def key_for_animal(self, animal: Animal) -> LegendKey | None:
        return self._by_animal.get((animal.species, animal.sex))

    def symbol_for(self, animal: Animal) -> str:
        key = self.key_for_animal(animal)
        if key is None:
            raise LegendError(f"There is no legend key defined for {animal!r}")
        return key.symbol


DEFAULT_LEGEND = BoardLegend([
    LegendKey(Species.LION, Sex.MALE, "L"),
    LegendKey(Species.LION, Sex.FEMALE, "l"),
    LegendKey(Species.CROCODILE, Sex.MALE, "K"),
    LegendKey(Species.CROCODILE, Sex.FEMALE, "k"),
    LegendKey(Species.ELEPHANT, Sex.MALE, "S"),
    LegendKey(Species.ELEPHANT, Sex.FEMALE, "s"),
    LegendKey(Species.ANTELOPE, Sex.MALE, "A"),
    LegendKey(Species.ANTELOPE, Sex.FEMALE, "a"),
])
