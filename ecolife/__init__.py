"""ecolife - turn-based predator, prey and breeding simulation on a grid."""

from ecolife.actions import (
    DEFAULT_TURN_ACTIONS,
    breeding_action,
    eating_action,
    movement_action,
)
from ecolife.animals import Animal, Sex, Species, SpeciesTraits, SPECIES_TRAITS, create_animal
from ecolife.board import Board, Field
from ecolife.clock import Clock
from ecolife.config import SimulationConfig
from ecolife.display import ConsoleDisplay, render_game
from ecolife.game import Game
from ecolife.legend import DEFAULT_LEGEND, BoardLegend, LegendKey
from ecolife.parser import BoardParser, read_board_file
from ecolife.types import (
    DOWN,
    LEFT,
    RIGHT,
    UP,
    BoardError,
    BoardParseError,
    EcolifeError,
    LegendError,
    TurnContext,
    UnknownAnimalError,
    Vector2,
)

__all__ = [
    "Game",
    "Board",
    "Field",
    "Clock",
    "Vector2",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "TurnContext",
    "Animal",
    "Species",
    "Sex",
    "SpeciesTraits",
    "SPECIES_TRAITS",
    "create_animal",
    "movement_action",
    "eating_action",
    "breeding_action",
    "DEFAULT_TURN_ACTIONS",
    "BoardLegend",
    "LegendKey",
    "DEFAULT_LEGEND",
    "BoardParser",
    "read_board_file",
    "render_game",
    "ConsoleDisplay",
    "SimulationConfig",
    "EcolifeError",
    "BoardParseError",
    "BoardError",
    "LegendError",
    "UnknownAnimalError",
]
