from pathlib import Path
import argparse
import logging
import sys
import time

try:
    from dotenv import load_dotenv
except Exception:
    load_dotenv = None

# Ensure the src directory is on sys.path when running as a script
_SRC_DIR = Path(__file__).resolve().parents[1]
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from pacing.application.services.character_creation_service import CharacterCreationService
from pacing.application.services.event_bus import EventBus
from pacing.application.services.simulation import Simulation
from pacing.bootstrap import PacingConfig, create_player_repository, create_rand, create_simulation, load_config
from pacing.domain.events import ActCompleted, LevelUpApplied, TaskStarted
from pacing.domain.services.rand import Rand

logger = logging.getLogger("pacing")

MIN_SLEEP_SECONDS = 0.05


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pacing", description="Run a character through the world without a window.")
    parser.add_argument("--generate", action="store_true", help="roll a brand new random character")
    parser.add_argument("--character", help="name of a saved character to resume")
    parser.add_argument("--time-scale", type=float, help="simulated seconds per real second")
    parser.add_argument("--seed", type=int, help="seed for a reproducible session")
    parser.add_argument("--max-tasks", type=int, help="stop after this many tasks have started")
    parser.add_argument("--db", help="SQLAlchemy URL for saves")
    parser.add_argument("--save-dir", help="directory for JSON saves")
    return parser


def apply_overrides(config: PacingConfig, args: argparse.Namespace) -> PacingConfig:
    if args.time_scale is not None:
        if args.time_scale <= 0:
            raise ValueError("--time-scale must be positive")
        config.time_scale = args.time_scale
    if args.seed is not None:
        config.seed = args.seed
    if args.db:
        config.database_url = args.db
    if args.save_dir:
        config.save_dir = args.save_dir
    return config


def run_headless(
    simulation: Simulation,
    rng: Rand,
    max_tasks: int | None = None,
    sleep=None,
    out=print,
) -> int:
    """Tick until ``max_tasks`` tasks have started; returns how many did."""

    sleep = sleep or time.sleep
    started = 0

    def _on_task(event: TaskStarted) -> None:
        nonlocal started
        started += 1
        out(event.description)

    def _on_level(event: LevelUpApplied) -> None:
        out(f"*** {event.player_name} is now level {event.to_level} ***")

    def _on_act(event: ActCompleted) -> None:
        out(f"*** Act {event.act_after} begins ***")

    bus = simulation.event_bus
    if bus is None:
        bus = simulation.event_bus = EventBus()
    bus.subscribe(TaskStarted, _on_task)
    bus.subscribe(LevelUpApplied, _on_level)
    bus.subscribe(ActCompleted, _on_act)
    try:
        while max_tasks is None or started < max_tasks:
            simulation.tick(rng)
            remaining = simulation.player.task_bar.remaining() / simulation.time_scale
            sleep(max(remaining, MIN_SLEEP_SECONDS))
    finally:
        bus.unsubscribe(TaskStarted, _on_task)
        bus.unsubscribe(LevelUpApplied, _on_level)
        bus.unsubscribe(ActCompleted, _on_act)
    return started


def main(argv=None):
    if load_dotenv is not None:
        load_dotenv()

    args = build_parser().parse_args(argv)
    player = None
    repo = None
    try:
        config = apply_overrides(load_config(), args)
        logging.basicConfig(level=getattr(logging, config.log_level, logging.WARNING))
        repo = create_player_repository(config)

        if args.character and not args.generate:
            player = repo.get(args.character)
            if player is None:
                print(f"No saved character named {args.character}.")
                return 1
        else:
            creation = CharacterCreationService(create_rand(config, "character-creation"), repo)
            player = creation.create_random_player()
            print(f"{player.name} the {player.race.name} {player.character_class.name} sets out.")

        simulation = create_simulation(player, config)
        run_headless(simulation, create_rand(config, player.name), args.max_tasks)
    except KeyboardInterrupt:
        print("\nSession ended.")
    except Exception as exc:
        logger.exception("Headless session failed")
        print("An unexpected error occurred. The session closed safely.")
        print(f"Reason: {exc}")
        return 1
    finally:
        if player is not None and repo is not None:
            repo.save(player)
    return 0


if __name__ == "__main__":
    sys.exit(main())
