"""Board parser - builds a populated Board from rows of legend symbols."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from ecolife.animals import create_animal
from ecolife.board import Board
from ecolife.legend import DEFAULT_LEGEND, BoardLegend
from ecolife.types import BoardParseError, Vector2

log = logging.getLogger(__name__)


class BoardParser:
    def __init__(self, legend: BoardLegend = DEFAULT_LEGEND) -> None:
        self._legend = legend

    @property
    def legend(self) -> BoardLegend:
        return self._legend

    def parse(self, rows: Sequence[str]) -> Board:
        """Build a board of width ``len(rows[0])`` and height ``len(rows)``.

        Raises BoardParseError for empty input, rows of differing length, or
        symbols missing from the legend.
        """
        if not rows or not rows[0]:
            raise BoardParseError("Input does not contain a single non-empty row")

        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise BoardParseError(
                    f"Row {y} has width {len(row)}, expected {width}", row=y
                )

        board = Board(width, len(rows))
        for y, row in enumerate(rows):
            for x, symbol in enumerate(row):
                if symbol == self._legend.empty_symbol:
                    continue
                key = self._legend.key_for_symbol(symbol)
                if key is None:
                    raise BoardParseError(
                        f"Unknown symbol {symbol!r} at ({x}, {y})", row=y, column=x
                    )
                board.place(create_animal(key.species, key.sex), Vector2(x, y))

        log.debug("parsed %dx%d board with %d animals",
                  board.width, board.height, board.occupied_count())
        return board


def read_board_file(path: str | Path) -> list[str]:
    """Read board rows from a text file, dropping line endings and trailing blank lines."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines
