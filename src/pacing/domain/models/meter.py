from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Meter:
    """Bounded progress accumulator.

    ``pos`` always stays within ``[0, max]``; every progress bar in the game
    (current task, experience, encumbrance, plot, quest) is one of these.
    """

    max: float = 1.0
    pos: float = 0.0

    def __post_init__(self) -> None:
        self.max = float(self.max)
        self.pos = min(max(float(self.pos), 0.0), self.max)

    @classmethod
    def with_max(cls, max_value: float) -> "Meter":
        return cls(max=max_value)

    def remaining(self) -> float:
        return self.max - self.pos

    def increment(self, amount: float) -> None:
        self.pos = min(self.pos + float(amount), self.max)

    def is_done(self) -> bool:
        return self.pos >= self.max

    def reset(self, max_value: float) -> None:
        self.max = float(max_value)
        self.pos = 0.0

    def fraction(self) -> float:
        if self.max <= 0:
            return 1.0
        return self.pos / self.max
