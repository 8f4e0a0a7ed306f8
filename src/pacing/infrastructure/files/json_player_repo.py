import json
import os
import time
from hashlib import sha1
from pathlib import Path
from typing import Any, List, Optional

from pacing.application.mappers.player_snapshot_mapper import SnapshotError, player_from_snapshot, player_to_snapshot
from pacing.domain.models.player import Player
from pacing.domain.repositories import PlayerRepository

DEFAULT_SAVE_DIR = "saves"


class JsonFilePlayerRepository(PlayerRepository):
    """One JSON envelope per character, replaced atomically on every save."""

    def __init__(self, root_dir: str | Path | None = None) -> None:
        self.root_dir = Path(root_dir or os.getenv("PACING_SAVE_DIR", DEFAULT_SAVE_DIR))
        self.root_dir.mkdir(parents=True, exist_ok=True)

    def _path_for_name(self, name: str) -> Path:
        name_hash = sha1(name.encode("utf-8")).hexdigest()
        return self.root_dir / f"{name_hash}.json"

    def _read_envelope(self, path: Path) -> dict[str, Any]:
        try:
            envelope = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SnapshotError(f"Unreadable save file {path.name}: {exc}") from exc
        if not isinstance(envelope, dict) or not isinstance(envelope.get("player"), dict):
            raise SnapshotError(f"Save file {path.name} has no player payload")
        return envelope

    def get(self, name: str) -> Optional[Player]:
        path = self._path_for_name(name)
        if not path.exists():
            return None
        return player_from_snapshot(self._read_envelope(path)["player"])

    def list_names(self) -> List[str]:
        names = []
        for path in self.root_dir.glob("*.json"):
            names.append(str(self._read_envelope(path)["name"]))
        return sorted(names)

    def save(self, player: Player) -> None:
        path = self._path_for_name(player.name)
        envelope = {
            "name": player.name,
            "saved_at": int(time.time()),
            "player": player_to_snapshot(player),
        }
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_text(json.dumps(envelope, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp_path, path)

    def delete(self, name: str) -> bool:
        path = self._path_for_name(name)
        if not path.exists():
            return False
        path.unlink()
        return True
