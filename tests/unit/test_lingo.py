import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from pacing.domain.services import lingo
from pacing.domain.services.rand import Rand
from pacing.domain.services.roman import to_roman


class PluralAndArticleTests(unittest.TestCase):
    def test_plural_applies_first_matching_rule(self) -> None:
        self.assertEqual("flies", lingo.plural("fly"))
        self.assertEqual("bi", lingo.plural("bus"))
        self.assertEqual("foxes", lingo.plural("fox"))
        self.assertEqual("witches", lingo.plural("witch"))
        self.assertEqual("wolves", lingo.plural("wolf"))
        self.assertEqual("Watchmen", lingo.plural("Watchman"))
        self.assertEqual("Goblins", lingo.plural("Goblin"))

    def test_indefinite_picks_article_or_count(self) -> None:
        self.assertEqual("an orc", lingo.indefinite("orc", 1))
        self.assertEqual("an Orc", lingo.indefinite("Orc", 1))
        self.assertEqual("a troll", lingo.indefinite("troll", 1))
        self.assertEqual("3 trolls", lingo.indefinite("troll", 3))

    def test_definite_pluralises_above_one(self) -> None:
        self.assertEqual("the Goblin", lingo.definite("Goblin", 1))
        self.assertEqual("the Goblins", lingo.definite("Goblin", 2))


class SeverityLadderTests(unittest.TestCase):
    def test_prefix_ignores_out_of_range_index(self) -> None:
        self.assertEqual("Rat", lingo.prefix(("big",), 0, "Rat"))
        self.assertEqual("Rat", lingo.prefix(("big",), 2, "Rat"))
        self.assertEqual("big Rat", lingo.prefix(("big",), 1, "Rat"))

    def test_sick_and_young_count_down_from_the_mildest_word(self) -> None:
        self.assertEqual("sick Rat", lingo.sick(1, "Rat"))
        self.assertEqual("Rat", lingo.sick(5, "Rat"))
        self.assertEqual("preadolescent Rat", lingo.young(2, "Rat"))
        self.assertEqual("Rat", lingo.young(-3, "Rat"))

    def test_big_and_special_count_up(self) -> None:
        self.assertEqual("titantic Rat", lingo.big(5, "Rat"))
        self.assertEqual("Battle-Rat", lingo.special(1, "Rat"))
        self.assertEqual("veteran Giant Rat", lingo.special(1, "Giant Rat"))


class NamingTests(unittest.TestCase):
    def test_act_name_uses_roman_numerals(self) -> None:
        self.assertEqual("Prologue", lingo.act_name(0))
        self.assertEqual("Act I", lingo.act_name(1))
        self.assertEqual("Act IV", lingo.act_name(4))

    def test_roman_numerals(self) -> None:
        self.assertEqual("MCMXCIV", to_roman(1994))
        self.assertEqual("XLIX", to_roman(49))
        self.assertEqual("", to_roman(0))

    def test_generated_names_are_title_case_and_seed_stable(self) -> None:
        first = lingo.generate_name(Rand.seeded(11))
        second = lingo.generate_name(Rand.seeded(11))
        self.assertEqual(first, second)
        self.assertTrue(first)
        for word in first.split(" "):
            self.assertEqual(word[:1].upper() + word[1:].lower(), word)

    def test_terminate_message_mentions_player(self) -> None:
        message = lingo.terminate_message("Brabbrab", Rand.seeded(2))
        self.assertTrue(message.startswith("Terminate "))
        self.assertTrue(message.endswith(" Brabbrab?"))


if __name__ == "__main__":
    unittest.main()
