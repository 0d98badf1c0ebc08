"""Clock - turn counter and TurnContext factory."""

import random

from ecolife.types import TurnContext


class Clock:
    def __init__(self, turn_number: int = 0) -> None:
        if turn_number < 0:
            raise ValueError("turn_number must be non-negative")
        self._turn_number = turn_number

    @property
    def turn_number(self) -> int:
        """Number of completed turns."""
        return self._turn_number

    def advance(self) -> int:
        self._turn_number += 1
        return self._turn_number

    def context(self, rng: random.Random) -> TurnContext:
        """Context for the turn about to be resolved."""
        return TurnContext(turn_number=self._turn_number + 1, random=rng)
