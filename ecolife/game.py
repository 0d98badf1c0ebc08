"""Game - owns the board and turn counter, runs the turn actions in order."""

from __future__ import annotations

import logging
import os
import random
from typing import Callable, Iterable

from ecolife.actions import DEFAULT_TURN_ACTIONS
from ecolife.board import Board
from ecolife.clock import Clock
from ecolife.types import TurnAction

log = logging.getLogger(__name__)

TurnHook = Callable[["Game"], None]


class Game:
    def __init__(
        self,
        board: Board,
        seed: int | None = None,
        actions: Iterable[TurnAction] | None = None,
    ) -> None:
        self._board = board
        self._clock = Clock()
        self._actions: list[TurnAction] = list(
            DEFAULT_TURN_ACTIONS if actions is None else actions
        )
        self._turn_hooks: list[TurnHook] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turn_number(self) -> int:
        return self._clock.turn_number

    @property
    def seed(self) -> int:
        return self._seed

    def on_turn(self, hook: TurnHook) -> None:
        """Register *hook* to be called with the game after every completed turn."""
        self._turn_hooks.append(hook)

    def next_turn(self) -> None:
        """Resolve one turn: every action in order, then advance the counter.

        If an action raises, the counter is not advanced and the board keeps
        whatever the earlier actions did.
        """
        ctx = self._clock.context(self._rng)
        for action in self._actions:
            action(self._board, ctx)
        self._clock.advance()
        log.debug("turn %d complete: %d animals on board",
                  self.turn_number, self._board.occupied_count())
        for hook in self._turn_hooks:
            hook(self)

    def run(self, turns: int) -> None:
        if turns < 0:
            raise ValueError("turns must be non-negative")
        for _ in range(turns):
            self.next_turn()
