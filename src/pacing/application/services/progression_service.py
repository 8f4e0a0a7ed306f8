from __future__ import annotations

import logging
from typing import Callable

from pacing.application.services.encounter_service import EncounterService
from pacing.domain.events import LevelUpApplied
from pacing.domain.models.catalogue import ALL_SLOTS, ALL_STATS, EquipmentPreset, EquipmentSlot, Stat
from pacing.domain.models.player import Player, inventory_capacity, level_up_time
from pacing.domain.services import catalogue
from pacing.domain.services.rand import Rand

logger = logging.getLogger(__name__)

MAX_MODIFIERS = 2


def _growth(base: int, rng: Rand) -> int:
    return base // 3 + 1 + rng.below(4)


class ProgressionService:
    """Level-ups and the four reward kinds handed out by quests and acts."""

    def __init__(self, encounters: EncounterService | None = None, event_publisher: Callable[[object], None] | None = None) -> None:
        self.encounters = encounters or EncounterService()
        self._event_publisher = event_publisher

    def level_up(self, player: Player, rng: Rand) -> LevelUpApplied:
        from_level = player.level
        player.level += 1

        hp_gain = _growth(player.stats[Stat.CONDITION], rng)
        mp_gain = _growth(player.stats[Stat.INTELLIGENCE], rng)
        player.stats.increment(Stat.HP_MAX, hp_gain)
        player.stats.increment(Stat.MP_MAX, mp_gain)

        self.choose_stat(player, rng)
        self.choose_stat(player, rng)
        self.choose_spell(player, rng)

        player.exp_bar.reset(level_up_time(player.level))

        event = LevelUpApplied(
            player_name=player.name,
            from_level=from_level,
            to_level=player.level,
            hp_gain=hp_gain,
            mp_gain=mp_gain,
        )
        logger.info("%s reached level %d", player.name, player.level)
        if self._event_publisher is not None:
            self._event_publisher(event)
        return event

    def choose_stat(self, player: Player, rng: Rand) -> Stat:
        weights = [(stat, value * value) for stat, value in player.stats]
        total = sum(weight for _, weight in weights)
        if rng.odds(1, 2) or total == 0:
            stat = rng.choice(ALL_STATS)
        else:
            remaining = rng.below(total)
            stat = weights[-1][0]
            for candidate, weight in weights:
                if remaining < weight:
                    stat = candidate
                    break
                remaining -= weight

        player.stats.increment(stat, 1)
        if stat == Stat.STRENGTH:
            player.inventory.set_capacity(inventory_capacity(player.stats))
        return stat

    def choose_spell(self, player: Player, rng: Rand) -> str:
        bound = player.stats[Stat.WISDOM] + player.level
        index = min(rng.below_low(bound), len(catalogue.SPELLS) - 1)
        spell = catalogue.SPELLS[index]
        player.spell_book.add(spell, 1)
        return spell

    def choose_equipment(self, player: Player, rng: Rand) -> tuple[EquipmentSlot, str]:
        presets, attributes = self._pools_for(rng.choice(ALL_SLOTS))

        preset = self.encounters.pick_equipment(presets, player.level, rng)
        name = preset.name
        delta = player.level - preset.quality

        # Only gear above the player's level earns attribute words; below par keeps a bare "-N".
        count = 0
        while count < MAX_MODIFIERS and delta > 0:
            modifier = rng.choice(attributes)
            if modifier.name == name or delta < abs(modifier.quality):
                break
            name = f"{modifier.name} {name}"
            delta -= modifier.quality
            count += 1

        if delta > 0:
            name = f"+{delta} {name}"
        elif delta < 0:
            name = f"{delta} {name}"

        # The slot that receives the piece is drawn again, independently of the pool it came from.
        slot = rng.choice(ALL_SLOTS)
        player.equipment.add(slot, name)
        return slot, name

    def choose_item(self, player: Player, rng: Rand) -> str:
        item = self.encounters.special_item(rng)
        player.inventory.add_item(item, 1)
        return item

    @staticmethod
    def _pools_for(slot: EquipmentSlot) -> tuple[tuple[EquipmentPreset, ...], tuple[EquipmentPreset, ...]]:
        if slot == EquipmentSlot.WEAPON:
            return catalogue.WEAPONS, catalogue.OFFENSE_ATTRIBUTE
        if slot == EquipmentSlot.SHIELD:
            return catalogue.SHIELDS, catalogue.DEFENSE_ATTRIBUTE
        return catalogue.ARMORS, catalogue.DEFENSE_ATTRIBUTE
