"""Text rendering of a game: a turn header and one line per board row."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from ecolife.legend import DEFAULT_LEGEND, BoardLegend

if TYPE_CHECKING:
    from ecolife.game import Game


def render_game(game: Game, legend: BoardLegend = DEFAULT_LEGEND) -> str:
    """Render *game* as text.

    Raises LegendError if an animal on the board has no legend symbol.
    """
    board = game.board
    lines = [f"Turn {game.turn_number}"]
    row: list[str] = []
    for field in sorted(board.all_fields(), key=lambda f: (f.position.y, f.position.x)):
        if field.occupant is None:
            row.append(legend.empty_symbol)
        else:
            row.append(legend.symbol_for(field.occupant))
        if len(row) == board.width:
            lines.append("".join(row))
            row = []
    return "\n".join(lines) + "\n"


class ConsoleDisplay:
    def __init__(self, legend: BoardLegend = DEFAULT_LEGEND, stream: TextIO | None = None) -> None:
        self._legend = legend
        self._stream = stream

    def display(self, game: Game) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(render_game(game, self._legend))
