from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

from pacing.application.mappers.player_snapshot_mapper import player_from_snapshot, player_to_snapshot
from pacing.domain.models.player import Player
from pacing.domain.repositories import PlayerRepository


class InMemoryPlayerRepository(PlayerRepository):
    """Keeps snapshots rather than live objects so a loaded player never aliases a running one."""

    def __init__(self) -> None:
        self._snapshots: Dict[str, Dict[str, Any]] = {}

    def get(self, name: str) -> Optional[Player]:
        snapshot = self._snapshots.get(name)
        if snapshot is None:
            return None
        return player_from_snapshot(copy.deepcopy(snapshot))

    def list_names(self) -> List[str]:
        return sorted(self._snapshots)

    def save(self, player: Player) -> None:
        self._snapshots[player.name] = copy.deepcopy(player_to_snapshot(player))

    def delete(self, name: str) -> bool:
        return self._snapshots.pop(name, None) is not None
