"""Simulation configuration dataclass and built-in starting board."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TURNS = 10

DEFAULT_BOARD: tuple[str, ...] = (
    ".sa..Aa.....S...",
    "L..K..........L.",
    "......S...s.....",
    "l..k............",
    "......S.....A...",
    "........a.......",
    "..l.............",
    "l.....K.........",
)


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable settings for one simulation run.

    Attributes:
        turns: Number of turns to play after the initial board is shown.
        seed: RNG seed for offspring sex; None picks a random seed.
        rows: Starting board, one string per row, in legend symbols.
    """

    turns: int = DEFAULT_TURNS
    seed: int | None = None
    rows: tuple[str, ...] = DEFAULT_BOARD

    def __post_init__(self) -> None:
        if self.turns < 0:
            raise ValueError("turns must be >= 0")
        if not self.rows:
            raise ValueError("rows must contain at least one row")
