from __future__ import annotations

from typing import Any, Mapping

from pacing.domain.models.catalogue import CharacterClass, EquipmentSlot, Monster, Race, Stat
from pacing.domain.models.equipment import Equipment
from pacing.domain.models.inventory import Inventory, InventoryItem
from pacing.domain.models.meter import Meter
from pacing.domain.models.player import Player
from pacing.domain.models.quest_book import QuestBook
from pacing.domain.models.spell_book import Spell, SpellBook
from pacing.domain.models.stats import Stats
from pacing.domain.models.task import Task, TaskKind


class SnapshotError(ValueError):
    """Raised when a stored snapshot cannot be turned back into a Player."""


def _meter_to_dict(meter: Meter) -> dict[str, float]:
    return {"pos": meter.pos, "max": meter.max}


def _monster_to_dict(monster: Monster | None) -> dict[str, Any] | None:
    if monster is None:
        return None
    return {"name": monster.name, "level": monster.level, "item": monster.item}


def _task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "description": task.description,
        "duration": task.duration,
        "kind": task.kind.value,
        "monster": _monster_to_dict(task.monster),
    }


def player_to_snapshot(player: Player) -> dict[str, Any]:
    quest_book = player.quest_book
    return {
        "name": player.name,
        "race": {"name": player.race.name, "attributes": [stat.label for stat in player.race.attributes]},
        "class": {
            "name": player.character_class.name,
            "attributes": [stat.label for stat in player.character_class.attributes],
        },
        "level": player.level,
        "elapsed": player.elapsed,
        "stats": {stat.label: value for stat, value in player.stats},
        "quest_book": {
            "quests": quest_book.quests(),
            "act": quest_book.act,
            "monster": _monster_to_dict(quest_book.monster),
            "plot": _meter_to_dict(quest_book.plot),
            "quest": _meter_to_dict(quest_book.quest),
        },
        "spell_book": [{"name": name, "level": level} for name, level in player.spell_book.spells()],
        "inventory": {
            "capacity": player.inventory.capacity,
            "gold": player.inventory.gold,
            "items": [{"name": name, "quantity": quantity} for name, quantity in player.inventory.items()],
        },
        "equipment": {
            "items": {slot.label: name for slot, name in player.equipment.items()},
            "best": player.equipment.best,
        },
        "task": None if player.task is None else _task_to_dict(player.task),
        "queue": [_task_to_dict(task) for task in player.queue],
        "task_bar": _meter_to_dict(player.task_bar),
        "exp_bar": _meter_to_dict(player.exp_bar),
    }


def _meter_from_dict(payload: Mapping[str, Any]) -> Meter:
    return Meter(max=float(payload["max"]), pos=float(payload["pos"]))


def _monster_from_dict(payload: Mapping[str, Any] | None) -> Monster | None:
    if payload is None:
        return None
    return Monster(str(payload["name"]), int(payload["level"]), payload.get("item"))


def _task_from_dict(payload: Mapping[str, Any]) -> Task:
    return Task(
        description=str(payload["description"]),
        duration=float(payload["duration"]),
        kind=TaskKind(payload["kind"]),
        monster=_monster_from_dict(payload.get("monster")),
    )


def _attributes(labels: list[str]) -> tuple[Stat, ...]:
    return tuple(Stat.from_label(label) for label in labels)


def player_from_snapshot(snapshot: Mapping[str, Any]) -> Player:
    try:
        quest_book_data = snapshot["quest_book"]
        quest_book = QuestBook(
            quests=list(quest_book_data["quests"]),
            act=int(quest_book_data["act"]),
            monster=_monster_from_dict(quest_book_data.get("monster")),
            plot=_meter_from_dict(quest_book_data["plot"]),
            quest=_meter_from_dict(quest_book_data["quest"]),
        )
        inventory_data = snapshot["inventory"]
        inventory = Inventory(
            capacity=int(inventory_data["capacity"]),
            gold=int(inventory_data["gold"]),
            items=[InventoryItem(str(row["name"]), int(row["quantity"])) for row in inventory_data["items"]],
        )
        equipment_data = snapshot["equipment"]
        equipment = Equipment(
            items={EquipmentSlot(label): str(name) for label, name in equipment_data["items"].items()},
            best=str(equipment_data["best"]),
        )
        task_data = snapshot.get("task")
        return Player(
            name=str(snapshot["name"]),
            race=Race(str(snapshot["race"]["name"]), _attributes(snapshot["race"]["attributes"])),
            character_class=CharacterClass(str(snapshot["class"]["name"]), _attributes(snapshot["class"]["attributes"])),
            stats=Stats({Stat.from_label(label): int(value) for label, value in snapshot["stats"].items()}),
            level=int(snapshot["level"]),
            elapsed=float(snapshot["elapsed"]),
            quest_book=quest_book,
            spell_book=SpellBook([Spell(str(row["name"]), int(row["level"])) for row in snapshot["spell_book"]]),
            inventory=inventory,
            equipment=equipment,
            task=None if task_data is None else _task_from_dict(task_data),
            queue=[_task_from_dict(row) for row in snapshot["queue"]],
            task_bar=_meter_from_dict(snapshot["task_bar"]),
            exp_bar=_meter_from_dict(snapshot["exp_bar"]),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise SnapshotError(f"Malformed player snapshot: {exc}") from exc
