from __future__ import annotations

import logging
from typing import Callable

from pacing.application.services.encounter_service import EncounterService
from pacing.application.services.progression_service import ProgressionService
from pacing.domain.events import ActCompleted, QuestCompleted
from pacing.domain.models.player import Player
from pacing.domain.services import lingo
from pacing.domain.services.rand import Rand

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 60 * 60


def plot_length(act: int) -> float:
    """Seconds of kill time the plot meter needs during ``act``."""

    return float(SECONDS_PER_HOUR * (1 + 5 * int(act)))


class QuestService:
    REWARDS = ("item", "spell", "equipment", "stat")

    def __init__(
        self,
        progression: ProgressionService | None = None,
        encounters: EncounterService | None = None,
        event_publisher: Callable[[object], None] | None = None,
    ) -> None:
        self.encounters = encounters or EncounterService()
        self.progression = progression or ProgressionService(self.encounters)
        self._event_publisher = event_publisher

    def complete_quest(self, player: Player, rng: Rand) -> str:
        quest_book = player.quest_book
        quest_book.quest.reset(float(50 + rng.below_low(1000)))

        finished = quest_book.current_quest()
        reward = None
        if finished is not None:
            reward = rng.choice(self.REWARDS)
            self._grant(reward, player, rng)

        quest_book.monster = None
        caption = self._next_caption(player, rng)
        quest_book.add_quest(caption)

        logger.info("%s started quest %r", player.name, caption)
        self._publish(QuestCompleted(player_name=player.name, completed=finished, started=caption, reward=reward))
        return caption

    def complete_act(self, player: Player, rng: Rand) -> int:
        quest_book = player.quest_book
        quest_book.next_act()
        quest_book.plot.reset(plot_length(quest_book.act))

        if quest_book.act > 1:
            self.progression.choose_item(player, rng)
            self.progression.choose_equipment(player, rng)

        logger.info("%s entered %s", player.name, lingo.act_name(quest_book.act))
        self._publish(ActCompleted(player_name=player.name, act_after=quest_book.act, plot_seconds=quest_book.plot.max))
        return quest_book.act

    def _grant(self, reward: str, player: Player, rng: Rand) -> None:
        if reward == "item":
            self.progression.choose_item(player, rng)
        elif reward == "spell":
            self.progression.choose_spell(player, rng)
        elif reward == "equipment":
            self.progression.choose_equipment(player, rng)
        elif reward == "stat":
            self.progression.choose_stat(player, rng)
        else:
            raise ValueError(f"Unknown quest reward: {reward}")

    def _next_caption(self, player: Player, rng: Rand) -> str:
        template = rng.below(5)
        if template == 0:
            monster = self.encounters.unnamed_monster(player.level, 3, rng)
            player.quest_book.monster = monster
            return f"Exterminate {lingo.definite(monster.name, 2)}"
        if template == 1:
            return f"Seek {lingo.definite(self.encounters.interesting_item(rng), 1)}"
        if template == 2:
            return f"Deliver this {self.encounters.boring_item(rng)}"
        if template == 3:
            return f"Fetch me {lingo.indefinite(self.encounters.boring_item(rng), 1)}"
        monster = self.encounters.unnamed_monster(player.level, 1, rng)
        return f"Placate {lingo.definite(monster.name, 2)}"

    def _publish(self, event: object) -> None:
        if self._event_publisher is not None:
            self._event_publisher(event)
