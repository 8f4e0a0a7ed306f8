from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


class Rand:
    """Seedable uniform generator passed explicitly into every stochastic call."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    @classmethod
    def seeded(cls, seed: int) -> "Rand":
        return cls(random.Random(int(seed)))

    def below(self, num: int) -> int:
        if int(num) < 1:
            raise ValueError(f"below() needs a positive bound, got {num}")
        return self._rng.randrange(int(num))

    def below_low(self, num: int) -> int:
        return min(self.below(num), self.below(num))

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("choice() from an empty sequence")
        return items[self.below(len(items))]

    def choice_low(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("choice_low() from an empty sequence")
        return items[self.below_low(len(items))]

    def odds(self, chance: int, quantum: int) -> bool:
        return self.below(quantum) < chance
