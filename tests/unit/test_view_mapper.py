import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from pacing.application.mappers.view_mapper import (
    to_equipment_view,
    to_game_view,
    to_inventory_view,
    to_plot_view,
    to_quest_log_view,
    to_spell_book_view,
    to_task_view,
)
from pacing.domain.models.catalogue import CharacterClass, EquipmentSlot, Race, Stat
from pacing.domain.models.player import Player
from pacing.domain.models.stats import Stats
from pacing.domain.models.task import Task


def _player() -> Player:
    return Player(
        name="Brabbrab",
        race=Race("Enchanted Motorcycle", (Stat.MP_MAX,)),
        character_class=CharacterClass("Shiv-Knight", (Stat.DEXTERITY,)),
        stats=Stats({Stat.STRENGTH: 5}),
    )


class ViewMapperTests(unittest.TestCase):
    def test_game_view_before_loading_has_no_task(self) -> None:
        view = to_game_view(_player())

        self.assertIsNone(view.task)
        self.assertEqual("Brabbrab", view.character.name)
        self.assertEqual(("STR", 5), view.character.stats[0])
        self.assertEqual("1200 exp required", view.character.experience.info)
        self.assertEqual("Prologue", view.plot.current_act)
        self.assertEqual([], view.plot.acts)

    def test_task_view_reports_percent(self) -> None:
        player = _player()
        player.set_task(Task.regular("Loading", 2.0))
        player.task_bar.increment(0.5)
        player.queue.append(Task.regular("Waiting", 1.0))

        view = to_task_view(player)

        self.assertEqual("Loading", view.description)
        self.assertEqual("regular", view.kind)
        self.assertEqual(25, view.progress.percent)
        self.assertEqual("25%", view.progress.info)
        self.assertEqual(1, view.queued)

    def test_spell_levels_are_roman(self) -> None:
        player = _player()
        player.spell_book.add("Slime Form", 1)
        player.spell_book.add("Hastiness", 4)

        view = to_spell_book_view(player)

        self.assertEqual([("Slime Form", "I"), ("Hastiness", "IV")], view.spells)
        self.assertEqual("Hastiness IV", view.best)

    def test_empty_spell_book_has_no_best(self) -> None:
        self.assertEqual("", to_spell_book_view(_player()).best)

    def test_equipment_and_inventory(self) -> None:
        player = _player()
        player.equipment.add(EquipmentSlot.HELM, "+1 Cambric")
        player.inventory.add_item("goblin ear", 3)
        player.inventory.add_gold(12)

        equipment = to_equipment_view(player)
        inventory = to_inventory_view(player)

        self.assertEqual(("Helm", "+1 Cambric"), equipment.slots[1])
        self.assertEqual("+1 Cambric Helm", equipment.best)
        self.assertEqual(12, inventory.gold)
        self.assertEqual([("goblin ear", 3)], inventory.items)
        self.assertEqual("3/15 cubits", inventory.encumbrance.info)
        self.assertEqual(20, inventory.encumbrance.percent)

    def test_plot_and_quest_logs(self) -> None:
        player = _player()
        quest_book = player.quest_book
        quest_book.next_act()
        quest_book.next_act()
        quest_book.plot.reset(200.0)
        quest_book.plot.increment(50.0)
        quest_book.add_quest("Fetch me a bone")
        quest_book.add_quest("Placate the Goblins")

        plot = to_plot_view(player)
        quests = to_quest_log_view(player)

        self.assertEqual(["Prologue", "Act I"], plot.acts)
        self.assertEqual("Act II", plot.current_act)
        self.assertEqual("25% complete", plot.progress.info)
        self.assertEqual(["Fetch me a bone"], quests.completed)
        self.assertEqual("Placate the Goblins", quests.current)


if __name__ == "__main__":
    unittest.main()
