from __future__ import annotations

from collections import deque

from pacing.domain.models.catalogue import Monster
from pacing.domain.models.meter import Meter


class QuestBook:
    MAX_QUESTS = 100

    def __init__(
        self,
        quests: list[str] | None = None,
        act: int = 0,
        monster: Monster | None = None,
        plot: Meter | None = None,
        quest: Meter | None = None,
    ) -> None:
        self._quests: deque[str] = deque(quests or ())
        self._act = int(act)
        self.monster = monster
        self.plot = plot or Meter.with_max(1.0)
        self.quest = quest or Meter.with_max(1.0)

    @property
    def act(self) -> int:
        return self._act

    def next_act(self) -> None:
        self._act += 1

    def add_quest(self, caption: str) -> None:
        while len(self._quests) >= self.MAX_QUESTS:
            self._quests.popleft()
        self._quests.append(str(caption))

    def current_quest(self) -> str | None:
        return self._quests[-1] if self._quests else None

    def quests(self) -> list[str]:
        return list(self._quests)

    def completed_quests(self) -> list[str]:
        return list(self._quests)[:-1]
