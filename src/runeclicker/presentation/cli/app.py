"""Headless simulation runner for the combat engine."""
from __future__ import annotations

import argparse
import logging
import secrets
from pathlib import Path
from typing import List, Sequence

from runeclicker.core.rng import RNG
from runeclicker.data.repositories import (
    PassivesRepository,
    RunesActiveRepository,
    RunesSupportRepository,
)
from runeclicker.domain.events import (
    EnemyDamagedEvent,
    EnemyKilledEvent,
    EngineEvent,
    GameOverEvent,
    PlayerLeveledUpEvent,
    WaveAdvancedEvent,
)
from runeclicker.domain.passive_tree import can_allocate, create_passive_tree
from runeclicker.domain.rune_build import (
    compute_dps,
    create_empty_build,
    describe_active,
    describe_support,
    set_active,
    toggle_support,
)
from runeclicker.services import ContentService, ContentUnavailableError
from runeclicker.services.combat_service import total_damage
from runeclicker.services.controllers import EngineController

from .config import load_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="runeclicker", description="Simulate a RuneClicker session headlessly.")
    parser.add_argument("--seconds", type=float, default=60.0, help="Simulated time to run.")
    parser.add_argument("--fps", type=int, default=60, help="Frames per simulated second.")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (random when omitted).")
    parser.add_argument("--class", dest="starting_class", choices=("str", "dex", "int"), default="str")
    parser.add_argument("--rune", default=None, help="Active rune id.")
    parser.add_argument("--support", action="append", default=[], help="Support rune id (repeatable).")
    parser.add_argument("--passive", action="append", default=[], help="Passive node to allocate when affordable.")
    parser.add_argument("--definitions", type=Path, default=None, help="Directory with content JSON.")
    parser.add_argument("--config", type=Path, default=None, help="Balance overrides JSON.")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def spend_pending_passives(engine: EngineController, pending: List[str]) -> List[str]:
    """Allocate queued nodes in order; unreachable ones are dropped, unaffordable ones wait."""
    allocated: List[str] = []
    while pending:
        node_id = pending[0]
        result = engine.allocate_passive(node_id)
        if result.success:
            allocated.append(pending.pop(0))
            logger.info("Allocated %s at level %d", node_id, engine.get_state().player.level)
            continue
        tree = engine.get_state().passive_tree
        if tree is not None and can_allocate(tree, node_id):
            break
        pending.pop(0)
        logger.warning("Skipping passive %s: %s", node_id, result.message)
    return allocated


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.fps <= 0:
        print("--fps must be positive.")
        return 2

    seed = args.seed if args.seed is not None else secrets.randbelow(2**31)
    content = ContentService(
        passives_repo=PassivesRepository(base_path=args.definitions),
        runes_active_repo=RunesActiveRepository(base_path=args.definitions),
        runes_support_repo=RunesSupportRepository(base_path=args.definitions),
    ).load()

    engine = EngineController(load_config(args.config), rng=RNG(seed))
    engine.update_passive_tree(create_passive_tree(content.passive_nodes, args.starting_class))

    build = create_empty_build()
    try:
        if args.rune:
            build = set_active(build, content.active_rune(args.rune))
        for support_id in args.support:
            build = toggle_support(build, content.support_rune(support_id))
    except ContentUnavailableError as exc:
        print(str(exc))
        return 2
    engine.update_rune_build(build)

    log: List[EngineEvent] = []
    engine.on_event(log.append)
    pending = list(args.passive)

    def spend_points(event: EngineEvent) -> None:
        if isinstance(event, PlayerLeveledUpEvent):
            spend_pending_passives(engine, pending)

    engine.on_event(spend_points)

    frames = int(args.seconds * args.fps)
    state = engine.run(frames, 1000 / args.fps)

    kills = sum(1 for event in log if isinstance(event, EnemyKilledEvent))
    damage = total_damage(log)
    crits = sum(1 for event in log if isinstance(event, EnemyDamagedEvent) and event.is_critical)
    waves = [event.wave for event in log if isinstance(event, WaveAdvancedEvent)]

    print(f"Seed: {seed}")
    print(f"Build: {describe_active(build.active) if build.active else 'none'} (rune DPS {compute_dps(build)})")
    for support in build.supports:
        print(f"  {support.name}: {describe_support(support)}")
    print(f"Level {state.player.level}  XP {state.player.experience:.0f}/{state.player.experience_to_next}")
    print(f"HP {state.player.hp:.0f}/{state.player.max_hp:.0f}  Score {state.score}  Wave {state.wave}")
    print(f"Kills {kills}  Damage dealt {damage}  Crits {crits}  Waves cleared {len(waves)}")
    if any(isinstance(event, GameOverEvent) for event in log):
        print("The player was overwhelmed.")
    return 0
