"""Command-line entry point: parse a board, then play and print each turn.

Run:
    python -m ecolife [--turns N] [--seed S] [--board PATH] [--log-level LEVEL]
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from ecolife.config import DEFAULT_TURNS, SimulationConfig
from ecolife.display import ConsoleDisplay
from ecolife.game import Game
from ecolife.parser import BoardParser, read_board_file
from ecolife.types import EcolifeError

log = logging.getLogger(__name__)


def run_simulation(config: SimulationConfig, display: ConsoleDisplay) -> Game:
    """Parse the configured board, show it, then play and show each turn."""
    board = BoardParser().parse(config.rows)
    game = Game(board, seed=config.seed)
    log.info("starting %d-turn run with seed %d", config.turns, game.seed)
    game.on_turn(display.display)
    display.display(game)
    game.run(config.turns)
    return game


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecolife",
        description="Turn-based ecosystem simulation on a text grid")
    parser.add_argument("--turns", type=int, default=DEFAULT_TURNS,
                        help=f"Turns to play (default: {DEFAULT_TURNS})")
    parser.add_argument("--seed", type=int, default=None,
                        help="RNG seed for offspring sex (default: random)")
    parser.add_argument("--board", default=None,
                        help="Text file with the starting board (default: built-in board)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.board is not None:
            config = SimulationConfig(
                turns=args.turns, seed=args.seed, rows=tuple(read_board_file(args.board)))
        else:
            config = SimulationConfig(turns=args.turns, seed=args.seed)
        run_simulation(config, ConsoleDisplay())
    except (EcolifeError, OSError, ValueError) as exc:
        log.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
