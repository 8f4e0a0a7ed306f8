from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass

from pacing.application.services.event_bus import EventBus
from pacing.application.services.seed_policy import session_seed
from pacing.application.services.simulation import Simulation
from pacing.domain.models.player import Player
from pacing.domain.repositories import PlayerRepository
from pacing.domain.services.catalogue import validate_catalogue
from pacing.domain.services.rand import Rand
from pacing.infrastructure.files.json_player_repo import DEFAULT_SAVE_DIR, JsonFilePlayerRepository
from pacing.infrastructure.inmemory.inmemory_player_repo import InMemoryPlayerRepository

logger = logging.getLogger(__name__)


@dataclass
class PacingConfig:
    time_scale: float = 1.0
    seed: int | None = None
    database_url: str | None = None
    save_dir: str = DEFAULT_SAVE_DIR
    log_level: str = "WARNING"


def _optional_int(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    return int(raw.strip())


def load_config() -> PacingConfig:
    time_scale = float(os.getenv("PACING_TIME_SCALE", "1.0"))
    if time_scale <= 0:
        raise ValueError(f"PACING_TIME_SCALE must be positive, got {time_scale}")
    return PacingConfig(
        time_scale=time_scale,
        seed=_optional_int(os.getenv("PACING_SEED")),
        database_url=os.getenv("PACING_DATABASE_URL", "").strip() or None,
        save_dir=os.getenv("PACING_SAVE_DIR", DEFAULT_SAVE_DIR).strip() or DEFAULT_SAVE_DIR,
        log_level=os.getenv("PACING_LOG_LEVEL", "WARNING").strip().upper() or "WARNING",
    )


def _build_sql_repository(database_url: str) -> PlayerRepository:
    from pacing.infrastructure.db.sql.connection import create_session_factory
    from pacing.infrastructure.db.sql.repos import SqlPlayerRepository

    repo = SqlPlayerRepository(create_session_factory(database_url))
    # Force an early connectivity check so fallback happens before the first tick.
    try:
        repo.ensure_schema()
    except Exception as exc:
        raise RuntimeError(f"Database bootstrap probe failed: {exc}") from exc
    return repo


def create_player_repository(config: PacingConfig) -> PlayerRepository:
    if config.database_url:
        try:
            return _build_sql_repository(config.database_url)
        except Exception as exc:  # pragma: no cover - best-effort fallback
            logger.warning("Database unavailable, falling back to JSON saves: %s", exc)
    try:
        return JsonFilePlayerRepository(config.save_dir)
    except OSError as exc:  # pragma: no cover - read-only filesystems
        logger.warning("Save directory unavailable, keeping saves in memory: %s", exc)
        return InMemoryPlayerRepository()


def create_rand(config: PacingConfig, player_name: str) -> Rand:
    seed = config.seed
    if seed is None:
        seed = session_seed(player_name, int(time.time() * 1000))
    logger.info("Session seed for %s is %d", player_name, seed)
    return Rand.seeded(seed)


def create_simulation(player: Player, config: PacingConfig, event_bus: EventBus | None = None) -> Simulation:
    validate_catalogue()
    return Simulation(player, time_scale=config.time_scale, event_bus=event_bus or EventBus())
