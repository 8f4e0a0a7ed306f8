from __future__ import annotations

from collections.abc import Sequence

from pacing.domain.models.catalogue import CharacterClass, EquipmentPreset, Monster, Race
from pacing.domain.models.task import Task
from pacing.domain.services import catalogue, lingo
from pacing.domain.services.rand import Rand

MIN_TASK_MILLIS = 1


class EncounterService:
    """Synthesises kill tasks, loot names and notable characters from the catalogue.

    The tables default to the static catalogue; tests pass narrower ones to pin
    down the closest-of-N selection.
    """

    def __init__(
        self,
        monsters: Sequence[Monster] = catalogue.MONSTERS,
        races: Sequence[Race] = catalogue.RACES,
        classes: Sequence[CharacterClass] = catalogue.CLASSES,
    ) -> None:
        self.monsters = tuple(monsters)
        self.races = tuple(races)
        self.classes = tuple(classes)

    def unnamed_monster(self, level: int, attempts: int, rng: Rand) -> Monster:
        monster = rng.choice(self.monsters)
        for _ in range(int(attempts)):
            alternative = rng.choice(self.monsters)
            if abs(level - alternative.level) < abs(level - monster.level):
                monster = alternative
        return monster

    def named_monster(self, level: int, rng: Rand) -> str:
        monster = self.unnamed_monster(level, 4, rng)
        return f"{lingo.generate_name(rng)} the {monster.name}"

    def impressive_npc(self, rng: Rand) -> str:
        title = rng.choice(catalogue.IMPRESSIVE_TITLES)
        if rng.odds(1, 3):
            return f"{title} of the {rng.choice(self.races).name}"
        return f"{title} of {lingo.generate_name(rng)}"

    @staticmethod
    def pick_equipment(presets: Sequence[EquipmentPreset], goal: int, rng: Rand) -> EquipmentPreset:
        picked = rng.choice(presets)
        for _ in range(5):
            alternative = rng.choice(presets)
            if abs(goal - alternative.quality) < abs(goal - picked.quality):
                picked = alternative
        return picked

    @staticmethod
    def interesting_item(rng: Rand) -> str:
        return f"{rng.choice(catalogue.ITEM_ATTRIBUTES)} {rng.choice(catalogue.SPECIALS)}"

    def special_item(self, rng: Rand) -> str:
        return f"{self.interesting_item(rng)} of {rng.choice(catalogue.ITEM_PREPOSITION)}"

    @staticmethod
    def boring_item(rng: Rand) -> str:
        return rng.choice(catalogue.BORING_ITEMS)

    def monster_task(self, player_level: int, quest_monster: Monster | None, rng: Rand) -> Task:
        player_level = int(player_level)
        level = player_level
        for _ in range(player_level):
            if rng.odds(2, 5):
                level += rng.below(2) * 2 - 1
        level = max(level, 1)

        is_definite = False
        monster: Monster | None = None
        if rng.odds(1, 25):
            race = rng.choice(self.races)
            if rng.odds(1, 2):
                name = f"passing {race.name} {rng.choice(self.classes).name}"
            else:
                title = rng.choice_low(catalogue.TITLES)
                name = f"{title} {lingo.generate_name(rng)} the {race.name}"
                is_definite = True
            target = level
        elif quest_monster is not None and rng.odds(1, 4):
            monster = quest_monster
            name = monster.name
            target = monster.level
        else:
            monster = self.unnamed_monster(level, 5, rng)
            name = monster.name
            target = monster.level

        quantity = 1
        if level - target > 10:
            divisor = max(target, 1)
            quantity = max(1, (level + rng.below(divisor)) // divisor)
            level //= quantity

        name = self._qualify(name, level, target, rng)
        if not is_definite:
            name = lingo.indefinite(name, quantity)

        millis = max((2 * 3 * level * quantity * 1000) // player_level, MIN_TASK_MILLIS)
        return Task.kill(f"Attacking {name}", millis / 1000.0, monster)

    @staticmethod
    def _qualify(name: str, level: int, target: int, rng: Rand) -> str:
        # Branch order is load-bearing: every non-negative gap stops at "unreal",
        # which leaves the big/special branches below it unreachable.
        gap = level - target
        if gap <= -10:
            return f"imaginary {name}"
        if gap < -5:
            intensity = 5 - rng.below(10 + gap + 1)
            return lingo.sick(intensity, lingo.young(target - level - intensity, name))
        if gap < 0 and rng.odds(1, 2):
            return lingo.sick(gap, name)
        if gap < 0:
            return lingo.young(gap, name)
        if gap >= -10:
            return f"unreal {name}"
        if gap > 5:
            intensity = 5 - rng.below(10 - gap + 1)
            return lingo.big(intensity, lingo.special(target - level - intensity, name))
        if gap > 0 and rng.odds(1, 2):
            return lingo.big(gap, name)
        if gap > 0:
            return lingo.special(gap, name)
        raise RuntimeError(f"No severity wording for level gap {gap}")
