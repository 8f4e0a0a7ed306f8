import json
from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.orm import sessionmaker

from pacing.application.mappers.player_snapshot_mapper import SnapshotError, player_from_snapshot, player_to_snapshot
from pacing.domain.models.player import Player
from pacing.domain.repositories import PlayerRepository
from .connection import create_session_factory

CREATE_PLAYER_SAVE_TABLE = """
CREATE TABLE IF NOT EXISTS player_save (
    name VARCHAR(120) NOT NULL PRIMARY KEY,
    level INTEGER NOT NULL,
    act INTEGER NOT NULL,
    snapshot_json TEXT NOT NULL
)
"""


class SqlPlayerRepository(PlayerRepository):
    def __init__(self, session_factory: sessionmaker | None = None) -> None:
        self.SessionLocal = session_factory or create_session_factory()

    def ensure_schema(self) -> None:
        with self.SessionLocal.begin() as session:
            session.execute(text(CREATE_PLAYER_SAVE_TABLE))

    def get(self, name: str) -> Optional[Player]:
        with self.SessionLocal() as session:
            row = session.execute(
                text("SELECT snapshot_json FROM player_save WHERE name = :name"),
                {"name": str(name)},
            ).first()
        if row is None:
            return None
        try:
            snapshot = json.loads(row.snapshot_json)
        except ValueError as exc:
            raise SnapshotError(f"Stored snapshot for {name} is not valid JSON") from exc
        return player_from_snapshot(snapshot)

    def list_names(self) -> List[str]:
        with self.SessionLocal() as session:
            rows = session.execute(text("SELECT name FROM player_save ORDER BY name")).all()
        return [str(row.name) for row in rows]

    def save(self, player: Player) -> None:
        params = {
            "name": player.name,
            "level": int(player.level),
            "act": int(player.quest_book.act),
            "snapshot_json": json.dumps(player_to_snapshot(player)),
        }
        with self.SessionLocal.begin() as session:
            dialect = session.bind.dialect.name if session.bind is not None else "sqlite"
            if dialect == "mysql":
                upsert = """
                    INSERT INTO player_save (name, level, act, snapshot_json)
                    VALUES (:name, :level, :act, :snapshot_json)
                    ON DUPLICATE KEY UPDATE
                        level = VALUES(level),
                        act = VALUES(act),
                        snapshot_json = VALUES(snapshot_json)
                """
            else:
                upsert = """
                    INSERT INTO player_save (name, level, act, snapshot_json)
                    VALUES (:name, :level, :act, :snapshot_json)
                    ON CONFLICT(name) DO UPDATE SET
                        level = excluded.level,
                        act = excluded.act,
                        snapshot_json = excluded.snapshot_json
                """
            session.execute(text(upsert), params)

    def delete(self, name: str) -> bool:
        with self.SessionLocal.begin() as session:
            result = session.execute(text("DELETE FROM player_save WHERE name = :name"), {"name": str(name)})
            deleted = bool(result.rowcount)
        return deleted
