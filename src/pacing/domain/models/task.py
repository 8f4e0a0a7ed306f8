from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pacing.domain.models.catalogue import Monster


class TaskKind(str, Enum):
    KILL = "kill"
    BUY = "buy"
    HEADING_OUT = "heading_out"
    HEADING_TO_MARKET = "heading_to_market"
    SELL = "sell"
    REGULAR = "regular"
    PLOT = "plot"


@dataclass(frozen=True)
class Task:
    """One unit of simulated work; ``duration`` is in seconds.

    Only ``TaskKind.KILL`` carries a monster, and even then it may be ``None``
    when the encounter was a notable NPC rather than a catalogue monster.
    """

    description: str
    duration: float
    kind: TaskKind = TaskKind.REGULAR
    monster: Monster | None = None

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"Task duration cannot be negative: {self.duration}")
        if self.monster is not None and self.kind != TaskKind.KILL:
            raise ValueError(f"Only kill tasks carry a monster, got {self.kind.value}")

    @classmethod
    def regular(cls, description: str, duration: float) -> "Task":
        return cls(description, float(duration), TaskKind.REGULAR)

    @classmethod
    def plot(cls, description: str, duration: float) -> "Task":
        return cls(description, float(duration), TaskKind.PLOT)

    @classmethod
    def sell(cls, description: str, duration: float) -> "Task":
        return cls(description, float(duration), TaskKind.SELL)

    @classmethod
    def buy(cls, description: str, duration: float) -> "Task":
        return cls(description, float(duration), TaskKind.BUY)

    @classmethod
    def heading_out(cls, description: str, duration: float) -> "Task":
        return cls(description, float(duration), TaskKind.HEADING_OUT)

    @classmethod
    def heading_to_market(cls, description: str, duration: float) -> "Task":
        return cls(description, float(duration), TaskKind.HEADING_TO_MARKET)

    @classmethod
    def kill(cls, description: str, duration: float, monster: Monster | None = None) -> "Task":
        return cls(description, float(duration), TaskKind.KILL, monster)

    @property
    def is_kill(self) -> bool:
        return self.kind == TaskKind.KILL
