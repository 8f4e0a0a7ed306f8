import os
import sys
import tempfile
from pathlib import Path
import unittest
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from pacing.bootstrap import PacingConfig, create_player_repository, create_rand, create_simulation, load_config
from pacing.domain.models.catalogue import CharacterClass, Race
from pacing.domain.models.player import Player
from pacing.domain.models.stats import Stats
from pacing.infrastructure.db.sql.repos import SqlPlayerRepository
from pacing.infrastructure.files.json_player_repo import JsonFilePlayerRepository


class LoadConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            config = load_config()

        self.assertEqual(1.0, config.time_scale)
        self.assertIsNone(config.seed)
        self.assertIsNone(config.database_url)
        self.assertEqual("saves", config.save_dir)
        self.assertEqual("WARNING", config.log_level)

    def test_environment_overrides(self) -> None:
        env = {
            "PACING_TIME_SCALE": "60",
            "PACING_SEED": " 1234 ",
            "PACING_DATABASE_URL": "sqlite:///:memory:",
            "PACING_LOG_LEVEL": "debug",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            config = load_config()

        self.assertEqual(60.0, config.time_scale)
        self.assertEqual(1234, config.seed)
        self.assertEqual("sqlite:///:memory:", config.database_url)
        self.assertEqual("DEBUG", config.log_level)

    def test_non_positive_time_scale_is_rejected(self) -> None:
        with mock.patch.dict(os.environ, {"PACING_TIME_SCALE": "-2"}, clear=True):
            with self.assertRaises(ValueError):
                load_config()


class RepositorySelectionTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)

    def test_database_url_selects_sql_repository(self) -> None:
        repo = create_player_repository(PacingConfig(database_url="sqlite:///:memory:", save_dir=self._tmp.name))
        self.assertIsInstance(repo, SqlPlayerRepository)

    def test_unusable_database_falls_back_to_json(self) -> None:
        config = PacingConfig(database_url="nosuchdialect://nowhere/pacing", save_dir=self._tmp.name)

        with self.assertLogs("pacing.bootstrap", level="WARNING"):
            repo = create_player_repository(config)

        self.assertIsInstance(repo, JsonFilePlayerRepository)

    def test_no_database_uses_json(self) -> None:
        repo = create_player_repository(PacingConfig(save_dir=self._tmp.name))
        self.assertIsInstance(repo, JsonFilePlayerRepository)


class SessionFactoryTests(unittest.TestCase):
    def test_fixed_seed_gives_identical_rands(self) -> None:
        config = PacingConfig(seed=99)
        rand_a = create_rand(config, "Brabbrab")
        rand_b = create_rand(config, "Gromgrom")
        self.assertEqual([rand_a.below(100) for _ in range(5)], [rand_b.below(100) for _ in range(5)])

    def test_simulation_uses_configured_time_scale(self) -> None:
        player = Player(name="Brabbrab", race=Race("Elf"), character_class=CharacterClass("Bard"), stats=Stats())

        simulation = create_simulation(player, PacingConfig(time_scale=30.0))

        self.assertEqual(30.0, simulation.time_scale)
        self.assertIsNotNone(simulation.event_bus)


if __name__ == "__main__":
    unittest.main()
