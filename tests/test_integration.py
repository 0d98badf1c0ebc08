"""End-to-end scenarios: full turns through Game on small boards."""

import random

from ecolife.actions import eating_action, movement_action
from ecolife.animals import Sex, Species
from ecolife.config import DEFAULT_BOARD
from ecolife.display import render_game
from ecolife.game import Game
from ecolife.parser import BoardParser
from ecolife.types import TurnContext, Vector2


def make_game(*rows: str, seed: int = 42) -> Game:
    return Game(BoardParser().parse(list(rows)), seed=seed)


def board_rows(game: Game) -> list[str]:
    return render_game(game).splitlines()[1:]


# --- Scenarios ---

def test_lion_eats_neighbouring_antelope_then_advances():
    game = make_game("LaA")
    game.next_turn()
    # Nobody can move; the female antelope has the lion on her left.
    assert board_rows(game) == ["L.A"]
    game.next_turn()
    # The lion steps right and is now next to the male antelope.
    assert board_rows(game) == [".L."]


def test_antelope_pair_without_room_is_stable():
    game = make_game("Aa")
    game.run(10)
    assert game.turn_number == 10
    assert board_rows(game) == ["Aa"]


def test_lion_pair_produces_one_cub_above_female():
    game = make_game("..", "Ll", "..")
    game.next_turn()
    rows = board_rows(game)
    assert rows[1:] == ["Ll", ".."]
    assert rows[0][0] == "."
    cub = game.board.field_at(Vector2(1, 0)).occupant
    assert cub is not None
    assert cub.species is Species.LION
    assert game.board.occupied_count() == 3


def test_cub_sex_follows_seeded_random():
    for seed in range(20):
        game = make_game("..", "Ll", "..", seed=seed)
        game.next_turn()
        cub = game.board.field_at(Vector2(1, 0)).occupant
        expected = Sex.MALE if random.Random(seed).random() < 0.5 else Sex.FEMALE
        assert cub.sex is expected


def test_elephants_never_eat_or_get_eaten():
    game = make_game("S.", ".L", "a.")
    game.run(5)
    census = game.board.census()
    assert census[(Species.ELEPHANT, Sex.MALE)] == 1


# --- Invariants over the default board ---

def test_movement_keeps_every_animal_exactly_once():
    board = BoardParser().parse(DEFAULT_BOARD)
    animals = [f.occupant for f in board.animal_fields()]
    movement_action(board, TurnContext(turn_number=1, random=random.Random(0)))
    after = [f.occupant for f in board.animal_fields()]
    assert len(after) == len(animals)
    assert {id(a) for a in after} == {id(a) for a in animals}


def test_eating_only_removes_edible_animals():
    board = BoardParser().parse(DEFAULT_BOARD)
    ctx = TurnContext(turn_number=1, random=random.Random(0))
    movement_action(board, ctx)
    non_edible_before = [f.occupant for f in board.animal_fields() if not f.occupant.is_edible]
    eating_action(board, ctx)
    non_edible_after = [f.occupant for f in board.animal_fields() if not f.occupant.is_edible]
    assert non_edible_after == non_edible_before


def test_default_run_is_reproducible():
    renders_a = []
    renders_b = []
    game_a = make_game(*DEFAULT_BOARD, seed=2024)
    game_b = make_game(*DEFAULT_BOARD, seed=2024)
    game_a.on_turn(lambda g: renders_a.append(render_game(g)))
    game_b.on_turn(lambda g: renders_b.append(render_game(g)))
    game_a.run(10)
    game_b.run(10)
    assert len(renders_a) == 10
    assert renders_a == renders_b


def test_population_never_exceeds_board():
    game = make_game(*DEFAULT_BOARD, seed=3)
    for _ in range(30):
        game.next_turn()
        assert game.board.occupied_count() <= game.board.width * game.board.height
