from __future__ import annotations

import logging
import time
from typing import Callable

from pacing.application.services.encounter_service import EncounterService
from pacing.application.services.event_bus import EventBus
from pacing.application.services.progression_service import ProgressionService
from pacing.application.services.quest_service import QuestService
from pacing.application.services.story_director import StoryDirector
from pacing.domain.events import CinematicQueued, TaskStarted
from pacing.domain.models.player import Player
from pacing.domain.models.task import Task, TaskKind
from pacing.domain.services import lingo
from pacing.domain.services.rand import Rand

logger = logging.getLogger(__name__)

FLAVOR_TASKS: tuple[tuple[str, float], ...] = (
    ("Experiencing an enigmatic and foreboding night vision", 10.0),
    ("Much is revealed about the wise old man you'd underestimated", 6.0),
    ("A shocking series of events leaves you alone and bewildered, but resolute", 6.0),
    ("Drawing upon an unrealized reserve of determination, you set out on a long and dangerous journey", 4.0),
)
PROLOGUE_PLOT_SECONDS = 28.0


class Simulation:
    """Tick engine that drives one player through tasks paced by wall-clock time.

    ``tick`` is cheap and may be called at any rate; whatever real time passed
    since the previous call (times ``time_scale``) is credited in one step.
    """

    def __init__(
        self,
        player: Player,
        time_scale: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        event_bus: EventBus | None = None,
        encounters: EncounterService | None = None,
    ) -> None:
        self.player = player
        self.time_scale = float(time_scale)
        self._clock = clock
        self._last = clock()
        self.event_bus = event_bus

        publisher = event_bus.publish if event_bus is not None else None
        self.encounters = encounters or EncounterService()
        self.progression = ProgressionService(self.encounters, event_publisher=publisher)
        self.quests = QuestService(self.progression, self.encounters, event_publisher=publisher)
        self.story = StoryDirector(self.encounters)

    def tick(self, rng: Rand) -> None:
        now = self._clock()
        dt = (now - self._last) * self.time_scale
        self._last = now

        player = self.player
        player.elapsed += dt

        if player.task is None:
            self._set_task(Task.regular("Loading", 2.0))
            for description, duration in FLAVOR_TASKS:
                player.queue.append(Task.regular(description, duration))
            player.queue.append(Task.plot(f"Loading {lingo.act_name(1)}", 2.0))
            player.quest_book.plot.reset(PROLOGUE_PLOT_SECONDS)
            return

        if not player.task_bar.is_done():
            player.task_bar.increment(dt)
            return

        if not player.task.is_kill:
            self.dequeue(rng)
            return

        earned = player.task_bar.max
        if player.exp_bar.is_done():
            self.progression.level_up(player, rng)
        else:
            player.exp_bar.increment(earned)

        quest_book = player.quest_book
        if quest_book.act >= 1:
            if quest_book.quest.is_done() or quest_book.current_quest() is None:
                self.quests.complete_quest(player, rng)
            else:
                quest_book.quest.increment(earned)

        if quest_book.plot.is_done():
            self.cinematic(rng)
        else:
            quest_book.plot.increment(earned)

        self.dequeue(rng)

    def dequeue(self, rng: Rand) -> None:
        player = self.player
        while player.task_bar.is_done():
            finished = player.task
            if finished is None:
                raise RuntimeError("A player should always be on a task once loading has started")

            if self._complete_task(finished, rng):
                break

            if player.inventory.encumbrance.is_done():
                self._set_task(Task.heading_to_market("Heading to market to sell loot", 4.0))
            elif player.queue:
                self._set_task(player.queue.pop())
            elif finished.kind not in (TaskKind.KILL, TaskKind.HEADING_OUT):
                if player.inventory.gold > player.equipment_price():
                    self._set_task(Task.buy("Negotiating purchase of better equipment", 5.0))
                else:
                    self._set_task(Task.heading_out("Heading out into the world", 4.0))
            else:
                self._set_task(self.encounters.monster_task(player.level, player.quest_book.monster, rng))

    def cinematic(self, rng: Rand) -> str:
        beats: list[Task] = []

        def enqueue(task: Task) -> None:
            beats.append(task)
            self.player.queue.append(task)
            self.dequeue(rng)

        sequence = self.story.play_cinematic(self.player, rng, enqueue)
        logger.info("%s is watching the %s cinematic", self.player.name, sequence)
        if self.event_bus is not None:
            self.event_bus.publish(CinematicQueued(player_name=self.player.name, sequence=sequence, beats=len(beats)))
        return sequence

    def _complete_task(self, task: Task, rng: Rand) -> bool:
        """Apply what finishing ``task`` earns; True when a new sell task was set."""

        player = self.player
        kind = task.kind
        if kind == TaskKind.KILL:
            monster = task.monster
            if monster is None:
                return False
            if monster.item is None:
                self.progression.choose_item(player, rng)
            else:
                player.inventory.add_item(f"{monster.name} {monster.item}".lower(), 1)
        elif kind == TaskKind.BUY:
            player.inventory.add_gold(-player.equipment_price())
            self.progression.choose_equipment(player, rng)
        elif kind in (TaskKind.HEADING_TO_MARKET, TaskKind.SELL):
            inventory = player.inventory
            if inventory.is_empty():
                return False
            if kind == TaskKind.SELL:
                item = inventory.pop()
                amount = item.quantity * player.level
                if " of " in item.name:
                    amount *= 1 + rng.below_low(10) * (1 + rng.below_low(player.level))
                inventory.add_gold(amount)
            if not inventory.is_empty():
                item = inventory.last()
                self._set_task(Task.sell(f"Selling {lingo.indefinite(item.name, item.quantity)}", 1.0))
                return True
        elif kind == TaskKind.PLOT:
            self.quests.complete_act(player, rng)
        elif kind in (TaskKind.REGULAR, TaskKind.HEADING_OUT):
            pass
        else:
            raise ValueError(f"Unknown task kind: {kind!r}")
        return False

    def _set_task(self, task: Task) -> None:
        self.player.set_task(task)
        logger.debug("%s: %s", self.player.name, task.description)
        if self.event_bus is not None:
            self.event_bus.publish(
                TaskStarted(
                    player_name=self.player.name,
                    description=task.description,
                    kind=task.kind.value,
                    duration=task.duration,
                )
            )
