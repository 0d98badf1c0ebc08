"""Tests for the command-line entry point."""

import pytest

from ecolife.cli import build_parser, main, run_simulation
from ecolife.config import SimulationConfig
from ecolife.display import ConsoleDisplay


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.turns == 10
    assert args.seed is None
    assert args.board is None
    assert args.log_level == "WARNING"


def test_main_default_board(capsys):
    assert main(["--turns", "2", "--seed", "7"]) == 0
    lines = capsys.readouterr().out.splitlines()
    headers = [line for line in lines if line.startswith("Turn ")]
    assert headers == ["Turn 0", "Turn 1", "Turn 2"]
    # One header plus eight rows per displayed turn.
    assert len(lines) == 3 * 9


def test_main_board_file(tmp_path, capsys):
    path = tmp_path / "board.txt"
    path.write_text("Aa\n", encoding="utf-8")
    assert main(["--turns", "1", "--seed", "1", "--board", str(path)]) == 0
    assert capsys.readouterr().out == "Turn 0\nAa\nTurn 1\nAa\n"


def test_main_bad_symbol_returns_error(tmp_path, capsys):
    path = tmp_path / "board.txt"
    path.write_text("Lx\n", encoding="utf-8")
    assert main(["--board", str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_main_missing_board_file_returns_error(tmp_path):
    assert main(["--board", str(tmp_path / "missing.txt")]) == 1


def test_main_negative_turns_returns_error():
    assert main(["--turns", "-1"]) == 1


def test_main_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        main(["--log-level", "LOUD"])


def test_run_simulation_returns_played_game(capsys):
    config = SimulationConfig(turns=3, seed=5, rows=("L..",))
    game = run_simulation(config, ConsoleDisplay())
    assert game.turn_number == 3
    assert game.seed == 5
    assert capsys.readouterr().out.splitlines()[-2:] == ["Turn 3", ".L."]
