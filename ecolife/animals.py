"""Animal model - species traits table, sexes, and breeding rules."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ecolife.types import DOWN, LEFT, RIGHT, UP, UnknownAnimalError, Vector2


class Species(Enum):
    LION = "lion"
    CROCODILE = "crocodile"
    ELEPHANT = "elephant"
    ANTELOPE = "antelope"


class Sex(Enum):
    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class SpeciesTraits:
    """Per-species behaviour flags.

    Attributes:
        movement_order: Directions tried, in order, when looking for a cell to move to.
        predator: Whether this species eats edible animals.
        edible: Whether this species can be eaten by predators.
    """

    movement_order: tuple[Vector2, ...]
    predator: bool = False
    edible: bool = False


SPECIES_TRAITS: dict[Species, SpeciesTraits] = {
    Species.LION: SpeciesTraits(movement_order=(RIGHT, LEFT), predator=True),
    Species.CROCODILE: SpeciesTraits(movement_order=(UP, DOWN), predator=True),
    Species.ELEPHANT: SpeciesTraits(movement_order=(UP, RIGHT, DOWN, LEFT)),
    Species.ANTELOPE: SpeciesTraits(movement_order=(RIGHT,), edible=True),
}


@dataclass(frozen=True, eq=False)
class Animal:
    """One creature on the board.

    Animals compare by identity: two female lions are still two animals.
    Use ``create_animal`` rather than the constructor so unknown species are
    rejected up front.
    """

    species: Species
    sex: Sex

    @property
    def traits(self) -> SpeciesTraits:
        return SPECIES_TRAITS[self.species]

    @property
    def movement_order(self) -> tuple[Vector2, ...]:
        return self.traits.movement_order

    @property
    def is_male(self) -> bool:
        return self.sex is Sex.MALE

    @property
    def is_female(self) -> bool:
        return self.sex is Sex.FEMALE

    @property
    def is_predator(self) -> bool:
        return self.traits.predator

    @property
    def is_edible(self) -> bool:
        return self.traits.edible

    def can_be_eaten_by(self, other: Animal) -> bool:
        return self.is_edible and other.is_predator

    def breed_with(self, male: Animal, rng: _random.Random) -> Animal | None:
        """Return an offspring of this female and *male*, or None if they cannot breed.

        The offspring's sex is drawn from *rng* with even odds. Parents are
        never modified.
        """
        if not self.is_female:
            raise ValueError(f"breed_with() needs a female receiver, got {self!r}")
        if not male.is_male:
            raise ValueError(f"breed_with() needs a male partner, got {male!r}")
        return BREEDING_RULES[self.species](male, rng)

    def __repr__(self) -> str:
        return f"Animal({self.sex.value} {self.species.value})"


def create_animal(species: Species, sex: Sex) -> Animal:
    if species not in SPECIES_TRAITS or not isinstance(sex, Sex):
        raise UnknownAnimalError(
            f"Cannot create animal: species={species!r}, sex={sex!r}"
        )
    return Animal(species=species, sex=sex)


def random_sex(rng: _random.Random) -> Sex:
    return Sex.MALE if rng.random() < 0.5 else Sex.FEMALE


BreedFn = Callable[[Animal, _random.Random], "Animal | None"]


def make_same_species_breeder(species: Species) -> BreedFn:
    """Return a breeding rule that only accepts males of *species*."""

    def breed(male: Animal, rng: _random.Random) -> Animal | None:
        if male.species is not species:
            return None
        return create_animal(species, random_sex(rng))

    return breed


BREEDING_RULES: dict[Species, BreedFn] = {
    species: make_same_species_breeder(species) for species in Species
}
