from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Mapping
from typing import Protocol

from pacing.domain.models.catalogue import ALL_STATS, PRIME_STATS, Stat


class _Below(Protocol):
    def below(self, num: int) -> int: ...


class Stats:
    """Quantity per stat; every key of ``Stat`` is always present."""

    def __init__(self, values: Mapping[Stat, int] | Iterable[tuple[Stat, int]] | None = None) -> None:
        provided = dict(values.items() if isinstance(values, Mapping) else (values or ()))
        unknown = [key for key in provided if key not in ALL_STATS]
        if unknown:
            raise KeyError(f"stat does not exist: {unknown[0]!r}")
        self._values: dict[Stat, int] = {stat: int(provided.get(stat, 0)) for stat in ALL_STATS}

    def __getitem__(self, stat: Stat) -> int:
        try:
            return self._values[stat]
        except KeyError:
            raise KeyError(f"stat does not exist: {stat!r}") from None

    def __iter__(self) -> Iterator[tuple[Stat, int]]:
        return iter(self._values.items())

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stats):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        body = ", ".join(f"{stat.label}={value}" for stat, value in self._values.items())
        return f"Stats({body})"

    def increment(self, stat: Stat, quantity: int) -> None:
        if stat not in self._values:
            raise KeyError(f"stat does not exist: {stat!r}")
        self._values[stat] += int(quantity)

    def best(self) -> Stat:
        return self._argmax(ALL_STATS)

    def best_prime(self) -> Stat:
        return self._argmax(PRIME_STATS)

    def _argmax(self, keys: Iterable[Stat]) -> Stat:
        best: Stat | None = None
        for stat in keys:
            if best is None or self._values[stat] > self._values[best]:
                best = stat
        if best is None:
            raise ValueError("at least a single stat must exist")
        return best

    def total(self) -> int:
        return sum(self._values.values())

    def copy(self) -> "Stats":
        return Stats(self._values)

    def as_dict(self) -> dict[Stat, int]:
        return dict(self._values)


class StatsBuilder:
    """Rolls starting stats and remembers the last few rolls for undo."""

    MAX_HISTORY = 10

    def __init__(self) -> None:
        self._history: deque[Stats] = deque()

    def roll(self, rng: _Below) -> Stats:
        sides = len(PRIME_STATS)
        values = {stat: 3 + sum(rng.below(sides) for _ in range(3)) for stat in PRIME_STATS}
        for derived, base in ((Stat.HP_MAX, Stat.CONDITION), (Stat.MP_MAX, Stat.INTELLIGENCE)):
            values[derived] = rng.below(len(ALL_STATS)) + values[base]

        stats = Stats(values)
        while len(self._history) >= self.MAX_HISTORY:
            self._history.popleft()
        self._history.append(stats)
        return stats.copy()

    def has_history(self) -> bool:
        return len(self._history) > 1

    def history_size(self) -> int:
        return len(self._history)

    def unroll(self) -> Stats:
        if not self._history:
            raise IndexError("no stats have been rolled yet")
        if len(self._history) > 1:
            self._history.pop()
        return self._history[-1].copy()
