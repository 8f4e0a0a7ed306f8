from __future__ import annotations

from collections.abc import Mapping

from pacing.domain.models.catalogue import ALL_SLOTS, EquipmentSlot

STARTING_EQUIPMENT: Mapping[EquipmentSlot, str] = {
    EquipmentSlot.WEAPON: "Sharp Rock",
    EquipmentSlot.HAUBERK: "-3 Burlap",
}


class Equipment:
    def __init__(self, items: Mapping[EquipmentSlot, str] | None = None, best: str | None = None) -> None:
        source = STARTING_EQUIPMENT if items is None else items
        self._items: dict[EquipmentSlot, str] = {slot: source[slot] for slot in ALL_SLOTS if slot in source}
        self.best = best if best is not None else self._items.get(EquipmentSlot.WEAPON, "")

    def __getitem__(self, slot: EquipmentSlot) -> str:
        return self._items.get(slot, "")

    def add(self, slot: EquipmentSlot, name: str) -> None:
        self._items[slot] = str(name)
        suffix = "" if slot.is_held else slot.label
        self.best = f"{name} {suffix}".rstrip()

    def items(self) -> list[tuple[EquipmentSlot, str]]:
        return [(slot, self._items[slot]) for slot in ALL_SLOTS if slot in self._items]
