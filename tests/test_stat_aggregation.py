from __future__ import annotations

from runeclicker.domain.passive_tree import create_passive_tree
from runeclicker.domain.rune_build import create_empty_build, set_active
from runeclicker.domain.stat_aggregation import (
    critical_damage,
    effective_attack_speed,
    effective_damage,
    roll_critical,
)
from runeclicker.domain.state import GameState
from tests.helpers.builders import ScriptedRNG, make_active, make_node, make_player


def _tree(**grants: float):
    return create_passive_tree((make_node("start_str", cost=0, grants=grants),), "str")


def _state(tree=None, rune=None) -> GameState:
    build = set_active(create_empty_build(), rune) if rune is not None else None
    return GameState(player=make_player(damage=50.0), passive_tree=tree, rune_build=build)


def test_effective_damage_defaults_to_player_damage() -> None:
    assert effective_damage(_state()) == 50


def test_physical_bonus_applies_without_active_rune() -> None:
    tree = _tree(damage_pct=25, phys_dmg_pct=25, spell_dmg_pct=100)
    assert effective_damage(_state(tree)) == 75


def test_rune_dps_replaces_player_damage_and_picks_categories() -> None:
    tree = _tree(damage_pct=25, spell_dmg_pct=25, proj_dmg_pct=25, phys_dmg_pct=25)

    spell = make_active(dps=100, elem="fire", tags=("Spell",))
    assert effective_damage(_state(tree, spell)) == 150

    physical_projectile = make_active(dps=100, elem="phys", tags=("Projectile",))
    assert effective_damage(_state(tree, physical_projectile)) == 175

    assert effective_damage(_state(None, spell)) == 100


def test_zero_dps_rune_falls_back_to_player_damage() -> None:
    assert effective_damage(_state(None, make_active(dps=0))) == 50


def test_critical_damage_without_tree_draws_nothing() -> None:
    rng = ScriptedRNG([0.0])
    assert critical_damage(80.0, _state(), rng) == 80.0
    assert rng.random_calls == 0


def test_critical_damage_rolls_against_tree_stats() -> None:
    state = _state(_tree(crit_chance=20, crit_multi=50))

    crit = roll_critical(100, state, ScriptedRNG([0.1]))
    assert crit.is_critical
    assert crit.damage == 200

    assert critical_damage(100, state, ScriptedRNG([0.5])) == 100


def test_no_crit_chance_never_crits() -> None:
    state = _state(_tree(crit_multi=300))
    assert critical_damage(100, state, ScriptedRNG([0.0])) == 100


def test_attack_speed_applies_passive_bonus() -> None:
    assert effective_attack_speed(_state()) == 1.5
    assert effective_attack_speed(_state(_tree(attack_speed_pct=50))) == 2.25


def test_rune_cast_rate_dominates_attack_speed() -> None:
    rune = make_active(cast_ms=500)
    assert effective_attack_speed(_state(None, rune)) == 2.0
    assert effective_attack_speed(_state(_tree(attack_speed_pct=50), rune)) == 3.0
