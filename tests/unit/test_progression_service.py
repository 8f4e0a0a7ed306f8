import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from pacing.application.services.progression_service import ProgressionService
from pacing.domain.events import LevelUpApplied
from pacing.domain.models.catalogue import CharacterClass, EquipmentSlot, PRIME_STATS, Race, Stat
from pacing.domain.models.player import Player
from pacing.domain.models.stats import Stats
from pacing.domain.services import catalogue
from pacing.domain.services.rand import Rand


class _ScriptedRand(Rand):
    def __init__(self, values=()) -> None:
        super().__init__()
        self.values = list(values)

    def below(self, num: int) -> int:
        value = self.values.pop(0) if self.values else 0
        if not 0 <= value < num:
            raise AssertionError(f"scripted draw {value} outside [0, {num})")
        return value


def _player(values=None, level: int = 1) -> Player:
    stats = Stats(values if values is not None else {stat: 9 for stat in PRIME_STATS})
    return Player(
        name="Brabbrab",
        race=Race("Half Orc", (Stat.HP_MAX,)),
        character_class=CharacterClass("Robot Monk", (Stat.STRENGTH,)),
        stats=stats,
        level=level,
    )


class LevelUpTests(unittest.TestCase):
    def test_level_up_grows_hp_mp_stats_and_spells(self) -> None:
        events: list[object] = []
        service = ProgressionService(event_publisher=events.append)
        player = _player()

        event = service.level_up(player, _ScriptedRand())

        self.assertEqual(2, player.level)
        self.assertEqual(4, player.stats[Stat.HP_MAX])
        self.assertEqual(4, player.stats[Stat.MP_MAX])
        self.assertEqual(11, player.stats[Stat.STRENGTH])
        self.assertEqual(21, player.inventory.capacity)
        self.assertEqual([(catalogue.SPELLS[0], 1)], player.spell_book.spells())
        self.assertEqual(2400.0, player.exp_bar.max)
        self.assertEqual(0.0, player.exp_bar.pos)
        self.assertEqual([event], events)
        self.assertIsInstance(event, LevelUpApplied)
        self.assertEqual((1, 2), (event.from_level, event.to_level))


class RewardTests(unittest.TestCase):
    def test_choose_stat_weighted_by_square_of_value(self) -> None:
        service = ProgressionService()
        player = _player({Stat.STRENGTH: 1, Stat.CONDITION: 2})

        chosen = service.choose_stat(player, _ScriptedRand([1, 3]))

        self.assertEqual(Stat.CONDITION, chosen)
        self.assertEqual(3, player.stats[Stat.CONDITION])

    def test_choose_stat_with_all_zero_stats_falls_back_to_uniform(self) -> None:
        service = ProgressionService()
        player = _player({})
        chosen = service.choose_stat(player, _ScriptedRand([1, 4]))
        self.assertEqual(Stat.WISDOM, chosen)

    def test_choose_spell_index_is_capped(self) -> None:
        service = ProgressionService()
        player = _player({Stat.WISDOM: 1000})
        spell = service.choose_spell(player, _ScriptedRand([1000, 1000]))
        self.assertEqual(catalogue.SPELLS[-1], spell)

    def test_choose_equipment_adds_a_modifier(self) -> None:
        service = ProgressionService()
        player = _player()

        slot, name = service.choose_equipment(player, _ScriptedRand())

        self.assertEqual(EquipmentSlot.WEAPON, slot)
        self.assertEqual("Polished Stick", name)
        self.assertEqual("Polished Stick", player.equipment[EquipmentSlot.WEAPON])
        self.assertEqual("Polished Stick", player.equipment.best)

    def test_choose_equipment_prefixes_leftover_quality(self) -> None:
        service = ProgressionService()
        player = _player(level=10)
        vorpal = [preset.name for preset in catalogue.OFFENSE_ATTRIBUTE].index("Vorpal")

        _, name = service.choose_equipment(player, _ScriptedRand([0, 0, 0, 0, 0, 0, 0, vorpal, vorpal]))

        self.assertEqual("+3 Vorpal Stick", name)

    def test_choose_equipment_below_par_gets_no_modifier(self) -> None:
        service = ProgressionService()
        player = _player()
        hauberk = list(EquipmentSlot).index(EquipmentSlot.HAUBERK)
        burlap = [preset.name for preset in catalogue.ARMORS].index("Burlap")

        slot, name = service.choose_equipment(player, _ScriptedRand([hauberk] + [burlap] * 6 + [hauberk]))

        self.assertEqual(EquipmentSlot.HAUBERK, slot)
        self.assertEqual("-2 Burlap", name)
        self.assertEqual("-2 Burlap Hauberk", player.equipment.best)

    def test_choose_equipment_wears_the_piece_in_a_separately_drawn_slot(self) -> None:
        service = ProgressionService()
        player = _player()
        helm = list(EquipmentSlot).index(EquipmentSlot.HELM)

        slot, name = service.choose_equipment(player, _ScriptedRand([0] * 8 + [helm]))

        self.assertEqual(EquipmentSlot.HELM, slot)
        self.assertEqual("Polished Stick", player.equipment[EquipmentSlot.HELM])
        self.assertEqual("Sharp Rock", player.equipment[EquipmentSlot.WEAPON])
        self.assertEqual("Polished Stick Helm", player.equipment.best)

    def test_choose_equipment_stacks_the_same_modifier_twice(self) -> None:
        service = ProgressionService()
        player = _player(level=3)

        _, name = service.choose_equipment(player, _ScriptedRand())

        self.assertEqual("+1 Polished Polished Stick", name)

    def test_low_level_gear_below_par_is_only_a_bare_penalty(self) -> None:
        service = ProgressionService()
        player = _player()
        rng = Rand.seeded(5)
        presets = {preset.name for preset in (*catalogue.WEAPONS, *catalogue.SHIELDS, *catalogue.ARMORS)}

        for _ in range(300):
            _, name = service.choose_equipment(player, rng)
            if name.startswith("-"):
                penalty, base = name.split(" ", 1)
                self.assertLess(int(penalty), 0)
                self.assertIn(base, presets, name)

    def test_choose_item_adds_special_loot(self) -> None:
        service = ProgressionService()
        player = _player()
        item = service.choose_item(player, Rand.seeded(8))
        self.assertIn(" of ", item)
        self.assertEqual([(item, 1)], player.inventory.items())


if __name__ == "__main__":
    unittest.main()
