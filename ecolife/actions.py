"""Turn actions - the movement, eating, and breeding phases of a turn.

Each action is a plain ``(board, ctx) -> None`` callable. An action takes its
working set from the board once, up front, then mutates occupancy in place
while walking that snapshot, so later items observe earlier items' effects.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ecolife.types import DOWN, LEFT, RIGHT, UP, TurnAction, TurnContext, Vector2

if TYPE_CHECKING:
    from ecolife.animals import Animal
    from ecolife.board import Board

log = logging.getLogger(__name__)

EATING_DIRECTIONS: tuple[Vector2, ...] = (UP, RIGHT, DOWN, LEFT)
MATE_DIRECTIONS: tuple[Vector2, ...] = (UP, RIGHT, LEFT, DOWN)
OFFSPRING_DIRECTIONS: tuple[Vector2, ...] = (UP, DOWN, LEFT, RIGHT)


def movement_action(board: Board, ctx: TurnContext) -> None:
    """Move every animal to the first empty cell in its movement order.

    Animals are visited top-to-bottom, left-to-right. A cell vacated earlier
    in the pass is available to animals visited later.
    """
    animal_fields = sorted(
        board.animal_fields(), key=lambda f: (f.position.y, f.position.x)
    )
    moves = 0
    for field in animal_fields:
        animal = field.occupant
        if animal is None:
            continue
        destination = board.first_relative_field_where(
            field.position, animal.movement_order, lambda f: f.occupant is None
        )
        if destination is None:
            continue
        field.occupant = None
        destination.occupant = animal
        moves += 1
    log.debug("turn %d movement: %d of %d animals moved",
              ctx.turn_number, moves, len(animal_fields))


def eating_action(board: Board, ctx: TurnContext) -> None:
    """Remove every edible animal that has a predator orthogonally adjacent.

    Predators stay put and have no limit on how many neighbours they eat.
    """
    eaten = 0
    for field in board.edible_fields():
        prey = field.occupant
        if prey is None or not prey.is_edible:
            continue
        predator_field = board.first_relative_field_where(
            field.position,
            EATING_DIRECTIONS,
            lambda f: f.occupant is not None and prey.can_be_eaten_by(f.occupant),
        )
        if predator_field is None:
            continue
        field.occupant = None
        eaten += 1
    log.debug("turn %d eating: %d animals eaten", ctx.turn_number, eaten)


def breeding_action(board: Board, ctx: TurnContext) -> None:
    """Let each female breed once with the first adjacent male, if any.

    Only the first male found in MATE_DIRECTIONS order is considered, even
    when he is of another species. Offspring go to the first empty cell
    around the mother in OFFSPRING_DIRECTIONS order; with no empty cell the
    offspring is lost. Both females and males are taken from the board as it
    stood when the phase began, so newborns neither breed nor mate this turn.
    """
    males: dict[Vector2, Animal] = {
        f.position: f.occupant for f in board.male_fields() if f.occupant is not None
    }

    born = 0
    lost = 0
    for field in board.female_fields():
        female = field.occupant
        if female is None or not female.is_female:
            continue
        mate_field = board.first_relative_field_where(
            field.position, MATE_DIRECTIONS, lambda f: f.position in males
        )
        if mate_field is None:
            continue
        child = female.breed_with(males[mate_field.position], ctx.random)
        if child is None:
            continue
        nest = board.first_relative_field_where(
            field.position, OFFSPRING_DIRECTIONS, lambda f: f.occupant is None
        )
        if nest is None:
            lost += 1
            continue
        nest.occupant = child
        born += 1
    log.debug("turn %d breeding: %d born, %d lost for lack of space",
              ctx.turn_number, born, lost)


DEFAULT_TURN_ACTIONS: tuple[TurnAction, ...] = (
    movement_action,
    eating_action,
    breeding_action,
)
