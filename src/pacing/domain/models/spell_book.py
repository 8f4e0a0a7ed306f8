from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Spell:
    name: str
    level: int


class SpellBook:
    def __init__(self, spells: list[Spell] | None = None) -> None:
        self._spells: list[Spell] = list(spells or [])

    def __len__(self) -> int:
        return len(self._spells)

    def add(self, name: str, level: int) -> None:
        for spell in self._spells:
            if spell.name == name:
                spell.level += int(level)
                return
        self._spells.append(Spell(name=str(name), level=int(level)))

    def spells(self) -> list[tuple[str, int]]:
        return [(spell.name, spell.level) for spell in self._spells]

    def level_of(self, name: str) -> int:
        for spell in self._spells:
            if spell.name == name:
                return spell.level
        return 0

    def best(self) -> Spell | None:
        best: Spell | None = None
        for spell in self._spells:
            if best is None or spell.level > best.level:
                best = spell
        return best
