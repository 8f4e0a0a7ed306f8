from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class MeterView:
    position: float
    maximum: float
    percent: int
    info: str = ""


@dataclass
class CharacterSheetView:
    name: str
    race: str
    class_name: str
    level: int
    stats: List[Tuple[str, int]] = field(default_factory=list)
    experience: MeterView | None = None


@dataclass
class SpellBookView:
    spells: List[Tuple[str, str]] = field(default_factory=list)
    best: str = ""


@dataclass
class EquipmentView:
    slots: List[Tuple[str, str]] = field(default_factory=list)
    best: str = ""


@dataclass
class InventoryView:
    gold: int
    items: List[Tuple[str, int]] = field(default_factory=list)
    encumbrance: MeterView | None = None


@dataclass
class PlotView:
    acts: List[str] = field(default_factory=list)
    current_act: str = ""
    progress: MeterView | None = None


@dataclass
class QuestLogView:
    completed: List[str] = field(default_factory=list)
    current: str | None = None
    progress: MeterView | None = None


@dataclass
class TaskView:
    description: str
    kind: str
    progress: MeterView | None = None
    queued: int = 0


@dataclass
class GameView:
    character: CharacterSheetView
    spells: SpellBookView
    equipment: EquipmentView
    inventory: InventoryView
    plot: PlotView
    quests: QuestLogView
    task: TaskView | None = None
    elapsed: float = 0.0
