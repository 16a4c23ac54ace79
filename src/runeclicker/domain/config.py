"""Tunable engine configuration and arena constants."""
from __future__ import annotations

from dataclasses import dataclass

from runeclicker.core.geometry import Position


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Balance knobs consumed by the world and combat services."""

    spawn_interval: float = 2000.0
    enemy_base_speed: float = 0.5
    enemy_base_hp: float = 100.0
    enemy_base_damage: float = 10.0
    player_base_damage: float = 50.0
    attack_speed: float = 1.5
    player_max_hp: float = 1000.0
    experience_multiplier: float = 1.0
    auto_attack: bool = True


DEFAULT_CONFIG = GameConfig()

ENEMY_COLORS = ("#ff4444", "#44ff44", "#4444ff", "#ffff44", "#ff44ff")

PLAYER_START = Position(400.0, 300.0)
COLLISION_DISTANCE = 30.0
SPAWN_DISTANCE = 350.0
CHAIN_RANGE = 300.0
CHAIN_FALLOFF = 0.8
BEAM_TICK_MS = 100.0
# Enemy movement is ``speed * delta_ms * MOVE_SCALE`` units per frame.
MOVE_SCALE = 0.06
