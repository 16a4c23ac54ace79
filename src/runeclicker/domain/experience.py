"""Experience curve and level-up rules."""
from __future__ import annotations

import math
from dataclasses import replace

from runeclicker.domain.entities import Player

CURVE_BASE = 100
CURVE_EXPONENT = 1.5
CURVE_MULTIPLIER = 1.2
POINTS_PER_LEVEL = 1
MAX_HP_PER_LEVEL = 50
DAMAGE_PER_LEVEL = 5


def experience_to_next(level: int) -> int:
    return math.floor(CURVE_BASE * math.pow(level, CURVE_EXPONENT) * CURVE_MULTIPLIER)


def level_up(player: Player) -> Player:
    """Spend one threshold worth of experience on a single level."""
    new_level = player.level + 1
    new_max_hp = player.max_hp + MAX_HP_PER_LEVEL
    return replace(
        player,
        level=new_level,
        experience=player.experience - player.experience_to_next,
        experience_to_next=experience_to_next(new_level),
        passive_points=player.passive_points + POINTS_PER_LEVEL,
        max_hp=new_max_hp,
        hp=new_max_hp,
        damage=player.damage + DAMAGE_PER_LEVEL,
    )


def add_experience(player: Player, amount: float) -> Player:
    """Grant experience, applying as many level-ups as it pays for."""
    updated = replace(player, experience=player.experience + amount)
    while updated.experience >= updated.experience_to_next:
        updated = level_up(updated)
    return updated


def experience_from_enemy(enemy_level: int, player_level: int) -> int:
    """Base enemy experience reduced for large level gaps."""
    base = 10 * enemy_level
    gap = abs(enemy_level - player_level)
    if gap > 5:
        return max(1, math.floor(base * 0.5))
    if gap > 3:
        return max(1, math.floor(base * 0.75))
    return base
