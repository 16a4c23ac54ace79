"""Factory for creating wave-scaled enemies around the player."""
from __future__ import annotations

from typing import Collection

from runeclicker.core.geometry import Position, point_on_circle
from runeclicker.core.rng import RNG
from runeclicker.domain.config import ENEMY_COLORS, SPAWN_DISTANCE, GameConfig
from runeclicker.domain.enemy_scaling import scale_enemy_stats
from runeclicker.domain.entities import Enemy

from .id_factory import make_instance_id


def create_enemy(
    center: Position,
    wave: int,
    config: GameConfig,
    rng: RNG,
    taken_ids: Collection[str] = (),
) -> Enemy:
    """Spawn an enemy on the spawn ring at a random angle around ``center``."""
    stats = scale_enemy_stats(config, wave=wave)
    return Enemy(
        id=make_instance_id("enemy", rng, taken_ids),
        position=point_on_circle(center, SPAWN_DISTANCE, rng.angle()),
        hp=stats.hp,
        max_hp=stats.hp,
        speed=stats.speed,
        damage=stats.damage,
        color=rng.choice(ENEMY_COLORS),
        level=stats.level,
        experience_value=stats.experience_value,
    )
