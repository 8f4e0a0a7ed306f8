from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from pacing.domain.models.catalogue import CharacterClass, Race, Stat
from pacing.domain.models.equipment import Equipment
from pacing.domain.models.inventory import Inventory
from pacing.domain.models.meter import Meter
from pacing.domain.models.quest_book import QuestBook
from pacing.domain.models.spell_book import SpellBook
from pacing.domain.models.stats import Stats
from pacing.domain.models.task import Task


def level_up_time(level: int) -> float:
    """Seconds of kill time needed to reach the level after ``level``."""

    return float(20 * int(level) * 60)


def inventory_capacity(stats: Stats) -> int:
    return 10 + stats[Stat.STRENGTH]


@dataclass
class Player:
    name: str
    race: Race
    character_class: CharacterClass
    stats: Stats
    level: int = 1
    elapsed: float = 0.0
    quest_book: QuestBook = field(default_factory=QuestBook)
    spell_book: SpellBook = field(default_factory=SpellBook)
    inventory: Inventory | None = None
    equipment: Equipment = field(default_factory=Equipment)
    task: Task | None = None
    queue: deque[Task] = field(default_factory=deque)
    task_bar: Meter = field(default_factory=lambda: Meter.with_max(1.0))
    exp_bar: Meter = field(default_factory=lambda: Meter.with_max(level_up_time(1)))

    def __post_init__(self) -> None:
        if self.inventory is None:
            self.inventory = Inventory(inventory_capacity(self.stats))
        if not isinstance(self.queue, deque):
            self.queue = deque(self.queue)
        if int(self.level) < 1:
            raise ValueError("Level must be at least 1")

    def set_task(self, task: Task) -> None:
        self.task_bar.reset(task.duration)
        self.task = task

    def total_queue_time(self) -> float:
        return sum(task.duration for task in self.queue)

    def equipment_price(self) -> int:
        return 5 * self.level**2 + 10 * self.level + 20
