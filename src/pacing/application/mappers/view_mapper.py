from __future__ import annotations

from pacing.application.dtos import (
    CharacterSheetView,
    EquipmentView,
    GameView,
    InventoryView,
    MeterView,
    PlotView,
    QuestLogView,
    SpellBookView,
    TaskView,
)
from pacing.domain.models.meter import Meter
from pacing.domain.models.player import Player
from pacing.domain.services import lingo
from pacing.domain.services.roman import to_roman


def _percent(meter: Meter) -> int:
    return int(round(meter.fraction() * 100))


def to_meter_view(meter: Meter, info: str = "") -> MeterView:
    return MeterView(position=meter.pos, maximum=meter.max, percent=_percent(meter), info=info)


def experience_info(meter: Meter) -> str:
    return f"{int(meter.remaining())} exp required"


def cubits_info(meter: Meter) -> str:
    return f"{int(meter.pos)}/{int(meter.max)} cubits"


def complete_info(meter: Meter) -> str:
    return f"{_percent(meter)}% complete"


def to_character_sheet_view(player: Player) -> CharacterSheetView:
    return CharacterSheetView(
        name=player.name,
        race=player.race.name,
        class_name=player.character_class.name,
        level=player.level,
        stats=[(stat.label, value) for stat, value in player.stats],
        experience=to_meter_view(player.exp_bar, experience_info(player.exp_bar)),
    )


def to_spell_book_view(player: Player) -> SpellBookView:
    best = player.spell_book.best()
    return SpellBookView(
        spells=[(name, to_roman(level)) for name, level in player.spell_book.spells()],
        best="" if best is None else f"{best.name} {to_roman(best.level)}",
    )


def to_equipment_view(player: Player) -> EquipmentView:
    return EquipmentView(
        slots=[(slot.label, name) for slot, name in player.equipment.items()],
        best=player.equipment.best,
    )


def to_inventory_view(player: Player) -> InventoryView:
    encumbrance = player.inventory.encumbrance
    return InventoryView(
        gold=player.inventory.gold,
        items=player.inventory.items(),
        encumbrance=to_meter_view(encumbrance, cubits_info(encumbrance)),
    )


def to_plot_view(player: Player) -> PlotView:
    act = player.quest_book.act
    plot = player.quest_book.plot
    return PlotView(
        acts=[lingo.act_name(number) for number in range(act)],
        current_act=lingo.act_name(act),
        progress=to_meter_view(plot, complete_info(plot)),
    )


def to_quest_log_view(player: Player) -> QuestLogView:
    quest = player.quest_book.quest
    return QuestLogView(
        completed=player.quest_book.completed_quests(),
        current=player.quest_book.current_quest(),
        progress=to_meter_view(quest, complete_info(quest)),
    )


def to_task_view(player: Player) -> TaskView | None:
    if player.task is None:
        return None
    return TaskView(
        description=player.task.description,
        kind=player.task.kind.value,
        progress=to_meter_view(player.task_bar, f"{_percent(player.task_bar)}%"),
        queued=len(player.queue),
    )


def to_game_view(player: Player) -> GameView:
    return GameView(
        character=to_character_sheet_view(player),
        spells=to_spell_book_view(player),
        equipment=to_equipment_view(player),
        inventory=to_inventory_view(player),
        plot=to_plot_view(player),
        quests=to_quest_log_view(player),
        task=to_task_view(player),
        elapsed=player.elapsed,
    )
