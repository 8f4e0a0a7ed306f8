import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from pacing.application.services.encounter_service import EncounterService
from pacing.application.services.story_director import OASIS_BEATS, StoryDirector
from pacing.domain.models.catalogue import CharacterClass, Monster, Race
from pacing.domain.models.player import Player
from pacing.domain.models.stats import Stats
from pacing.domain.models.task import TaskKind
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


class StoryDirectorTests(unittest.TestCase):
    def setUp(self) -> None:
        encounters = EncounterService(monsters=[Monster("Goblin", 3, "ear")], races=[Race("Elf")])
        self.director = StoryDirector(encounters)
        self.player = Player(name="Brabbrab", race=Race("Elf"), character_class=CharacterClass("Bard"), stats=Stats())
        self.beats = []

    def test_oasis_sequence_ends_with_next_act_loading(self) -> None:
        self.player.quest_book.next_act()

        sequence = self.director.play_cinematic(self.player, _ScriptedRand([0]), self.beats.append)

        self.assertEqual("oasis", sequence)
        self.assertEqual(list(OASIS_BEATS) + ["Loading Act II"], [task.description for task in self.beats])
        self.assertEqual([1.0] * 5, [task.duration for task in self.beats])
        self.assertEqual(TaskKind.PLOT, self.beats[-1].kind)
        self.assertTrue(all(task.kind == TaskKind.REGULAR for task in self.beats[:-1]))

    def test_nemesis_sequence_without_extra_rounds(self) -> None:
        sequence = self.director.play_cinematic(self.player, _ScriptedRand([1]), self.beats.append)

        self.assertEqual("nemesis", sequence)
        self.assertEqual(
            [
                "Your quarry is in sigh, but a mightly enemy bars your path!",
                "A desperate struggle commences with Brabbrab the Goblin",
                "Victory! Brabbrab the Goblin is slain! Exhauted, you lose consciousness",
                "You awake in a friendly place, but the road awaits",
                "Loading Act I",
            ],
            [task.description for task in self.beats],
        )
        self.assertEqual([1.0, 4.0, 3.0, 2.0, 1.0], [task.duration for task in self.beats])

    def test_nemesis_rounds_follow_the_swing(self) -> None:
        draws = [1] + [0] * 5 + [0] * 6 + [0, 1, 0, 0]

        self.director.play_cinematic(self.player, _ScriptedRand(draws), self.beats.append)

        descriptions = [task.description for task in self.beats]
        self.assertEqual(6, len(descriptions))
        self.assertEqual("Brabbrab the Goblin seems to have the upper hand", descriptions[2])
        self.assertEqual(1.0, self.beats[2].duration)

    def test_intrigue_sequence_has_six_beats(self) -> None:
        sequence = self.director.play_cinematic(self.player, _ScriptedRand([2, 0, 0, 0, 0]), self.beats.append)

        nemesis = f"{catalogue.IMPRESSIVE_TITLES[0]} of the Elf"
        self.assertEqual("intrigue", sequence)
        self.assertEqual(7, len(self.beats))
        self.assertEqual(f"Oh sweet relief! You've reached the protection of the good {nemesis}", self.beats[0].description)
        self.assertEqual(f"You forgot your {catalogue.BORING_ITEMS[0]} and go back to get it", self.beats[2].description)
        self.assertEqual(f"Could {nemesis} be a dirty double-dealer?", self.beats[4].description)
        self.assertEqual([2.0, 3.0, 2.0, 2.0, 2.0, 3.0, 1.0], [task.duration for task in self.beats])


if __name__ == "__main__":
    unittest.main()
