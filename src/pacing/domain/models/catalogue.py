from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Stat(str, Enum):
    STRENGTH = "STR"
    CONDITION = "CON"
    DEXTERITY = "DEX"
    INTELLIGENCE = "INT"
    WISDOM = "WIS"
    CHARISMA = "CHA"
    HP_MAX = "HP Max"
    MP_MAX = "MP Max"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "Stat":
        for stat in cls:
            if stat.value == label or stat.name == label:
                return stat
        raise KeyError(f"stat does not exist: {label!r}")


ALL_STATS: tuple[Stat, ...] = tuple(Stat)
PRIME_STATS: tuple[Stat, ...] = (
    Stat.STRENGTH,
    Stat.CONDITION,
    Stat.DEXTERITY,
    Stat.INTELLIGENCE,
    Stat.WISDOM,
    Stat.CHARISMA,
)


class EquipmentSlot(str, Enum):
    WEAPON = "Weapon"
    SHIELD = "Shield"
    HELM = "Helm"
    HAUBERK = "Hauberk"
    BRASSAIRTS = "Brassairts"
    VAMBRACES = "Vambraces"
    GAUNTLETS = "Gauntlets"
    CUISSES = "Cuisses"
    GREAVES = "Greaves"
    SOLLERETS = "Sollerets"

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_held(self) -> bool:
        return self in (EquipmentSlot.WEAPON, EquipmentSlot.SHIELD)


ALL_SLOTS: tuple[EquipmentSlot, ...] = tuple(EquipmentSlot)


@dataclass(frozen=True)
class Race:
    name: str
    attributes: tuple[Stat, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CharacterClass:
    name: str
    attributes: tuple[Stat, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Monster:
    name: str
    level: int
    item: str | None = None


@dataclass(frozen=True)
class EquipmentPreset:
    name: str
    quality: int
