from __future__ import annotations

from pacing.domain.models.catalogue import CharacterClass, Race
from pacing.domain.models.player import Player
from pacing.domain.models.stats import Stats, StatsBuilder
from pacing.domain.repositories import PlayerRepository
from pacing.domain.services import catalogue, lingo
from pacing.domain.services.rand import Rand


class CharacterCreationService:
    """Rolls, re-rolls and names a new character before the first tick."""

    def __init__(self, rng: Rand, player_repo: PlayerRepository | None = None) -> None:
        self.rng = rng
        self.player_repo = player_repo
        self.builder = StatsBuilder()

    def roll_stats(self) -> Stats:
        return self.builder.roll(self.rng)

    def unroll_stats(self) -> Stats:
        return self.builder.unroll()

    def can_unroll(self) -> bool:
        return self.builder.has_history()

    def random_name(self) -> str:
        return lingo.generate_name(self.rng)

    def random_race(self) -> Race:
        return self.rng.choice(catalogue.RACES)

    def random_class(self) -> CharacterClass:
        return self.rng.choice(catalogue.CLASSES)

    def find_race(self, name: str) -> Race:
        for race in catalogue.RACES:
            if race.name.lower() == str(name).strip().lower():
                return race
        raise ValueError(f"Unknown race: {name}")

    def find_class(self, name: str) -> CharacterClass:
        for character_class in catalogue.CLASSES:
            if character_class.name.lower() == str(name).strip().lower():
                return character_class
        raise ValueError(f"Unknown class: {name}")

    def create_player(self, name: str, race: Race, character_class: CharacterClass, stats: Stats) -> Player:
        name = str(name).strip()
        if not name:
            raise ValueError("Character name cannot be empty")
        if self.player_repo is not None and self.player_repo.exists(name):
            raise ValueError(f"A character named {name} already exists")
        return Player(name=name, race=race, character_class=character_class, stats=stats.copy())

    def create_random_player(self) -> Player:
        stats = self.roll_stats()
        return self.create_player(self.random_name(), self.random_race(), self.random_class(), stats)
