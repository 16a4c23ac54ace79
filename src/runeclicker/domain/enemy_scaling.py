"""Deterministic wave-based enemy stat scaling."""
from __future__ import annotations

from dataclasses import dataclass

from runeclicker.domain.config import GameConfig

# Linear per-wave growth keeps tuning predictable:
# - HP grows fastest so later waves survive more hits.
# - Contact damage trails HP slightly.
# - Speed grows slowest so enemies stay clickable.
HP_PER_WAVE = 0.2
SPEED_PER_WAVE = 0.1
DAMAGE_PER_WAVE = 0.15
EXPERIENCE_PER_LEVEL = 10


@dataclass(frozen=True, slots=True)
class ScaledEnemyStats:
    hp: float
    speed: float
    damage: float
    level: int
    experience_value: int


def scale_enemy_stats(config: GameConfig, *, wave: int) -> ScaledEnemyStats:
    level = max(1, wave)
    return ScaledEnemyStats(
        hp=config.enemy_base_hp * (1 + wave * HP_PER_WAVE),
        speed=config.enemy_base_speed * (1 + wave * SPEED_PER_WAVE),
        damage=config.enemy_base_damage * (1 + wave * DAMAGE_PER_WAVE),
        level=level,
        experience_value=EXPERIENCE_PER_LEVEL * level,
    )
