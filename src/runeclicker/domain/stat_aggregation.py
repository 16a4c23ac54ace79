"""Merge passive grants and rune stats into effective combat numbers."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping

from runeclicker.core.rng import RNG
from runeclicker.domain.passive_tree import aggregate_stats, stat
from runeclicker.domain.rune_build import compute_dps
from runeclicker.domain.state import GameState

BASE_CRIT_MULTIPLIER = 1.5


@dataclass(frozen=True, slots=True)
class CriticalRoll:
    damage: float
    is_critical: bool


def damage_increase(stats: Mapping[str, float], state: GameState) -> float:
    """Fractional increased damage that applies to the current build."""
    active = state.rune_build.active if state.rune_build else None
    percent = stat(stats, "damage_pct")
    if active is not None:
        if "Spell" in active.tags:
            percent += stat(stats, "spell_dmg_pct")
        if "Projectile" in active.tags:
            percent += stat(stats, "proj_dmg_pct")
    if active is None or active.base.elem == "phys":
        percent += stat(stats, "phys_dmg_pct")
    return percent / 100


def effective_damage(state: GameState) -> int:
    damage_source: float = state.player.damage
    passive_multiplier = 1.0
    if state.passive_tree is not None:
        passive_multiplier = 1 + damage_increase(aggregate_stats(state.passive_tree), state)
    if state.rune_build is not None and state.rune_build.active is not None:
        rune_dps = compute_dps(state.rune_build)
        if rune_dps > 0:
            # Runes replace the player's raw damage rather than adding to it.
            damage_source = rune_dps
    return math.floor(damage_source * passive_multiplier)


def roll_critical(base_damage: float, state: GameState, rng: RNG) -> CriticalRoll:
    """Roll a crit using the tree's ``crit_chance``/``crit_multi`` grants.

    Without a passive tree the crit system is inactive and no random draw is made.
    """
    if state.passive_tree is None:
        return CriticalRoll(damage=base_damage, is_critical=False)
    stats = aggregate_stats(state.passive_tree)
    crit_chance = stat(stats, "crit_chance") / 100
    crit_multi = BASE_CRIT_MULTIPLIER + stat(stats, "crit_multi") / 100
    if rng.random() < crit_chance:
        return CriticalRoll(damage=math.floor(base_damage * crit_multi), is_critical=True)
    return CriticalRoll(damage=base_damage, is_critical=False)


def critical_damage(base_damage: float, state: GameState, rng: RNG) -> float:
    return roll_critical(base_damage, state, rng).damage


def effective_attack_speed(state: GameState) -> float:
    """Attacks per second, after passive bonuses and the rune's cast rate."""
    base_speed = state.player.attack_speed
    modified = base_speed
    if state.passive_tree is not None:
        stats = aggregate_stats(state.passive_tree)
        modified = base_speed * (1 + stat(stats, "attack_speed_pct") / 100)
    active = state.rune_build.active if state.rune_build else None
    if active is not None and active.base.cast_ms > 0 and base_speed > 0:
        rune_rate = 1000 / active.base.cast_ms
        return rune_rate * (modified / base_speed)
    return modified
