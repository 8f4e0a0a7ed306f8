from dataclasses import dataclass


@dataclass
class TaskStarted:
    player_name: str
    description: str
    kind: str
    duration: float


@dataclass
class LevelUpApplied:
    player_name: str
    from_level: int
    to_level: int
    hp_gain: int
    mp_gain: int


@dataclass
class QuestCompleted:
    player_name: str
    completed: str | None
    started: str
    reward: str | None


@dataclass
class ActCompleted:
    player_name: str
    act_after: int
    plot_seconds: float


@dataclass
class CinematicQueued:
    player_name: str
    sequence: str
    beats: int
