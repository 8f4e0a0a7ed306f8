from __future__ import annotations

from dataclasses import dataclass

from pacing.domain.models.meter import Meter


@dataclass
class InventoryItem:
    name: str
    quantity: int


class Inventory:
    def __init__(self, capacity: int, gold: int = 0, items: list[InventoryItem] | None = None) -> None:
        self._capacity = int(capacity)
        self.gold = int(gold)
        self._items: list[InventoryItem] = list(items or [])
        self.encumbrance = Meter.with_max(self._capacity)
        self._update_encumbrance()

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> InventoryItem:
        return self._items[index]

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def items(self) -> list[tuple[str, int]]:
        return [(item.name, item.quantity) for item in self._items]

    def set_capacity(self, capacity: int) -> None:
        self._capacity = int(capacity)
        self.encumbrance.max = float(self._capacity)

    def add_gold(self, amount: int) -> None:
        self.gold += int(amount)

    def add_item(self, name: str, quantity: int) -> None:
        for item in self._items:
            if item.name == name:
                item.quantity += int(quantity)
                break
        else:
            self._items.append(InventoryItem(name=str(name), quantity=int(quantity)))
        self._update_encumbrance()

    def last(self) -> InventoryItem:
        if not self._items:
            raise IndexError("inventory is empty")
        return self._items[-1]

    def pop(self) -> InventoryItem:
        if not self._items:
            raise IndexError("cannot pop from an empty inventory")
        item = self._items.pop()
        self._update_encumbrance()
        return item

    def _update_encumbrance(self) -> None:
        # Assigned directly so the bar reports overflow when loot lands past capacity.
        self.encumbrance.pos = float(sum(item.quantity for item in self._items))
