"""Root game snapshot and its pure lifecycle transitions."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from runeclicker.domain.config import GameConfig, PLAYER_START
from runeclicker.domain.entities import Enemy, Player
from runeclicker.domain.passive_tree import PassiveTree
from runeclicker.domain.rune_build import RuneBuild


@dataclass(frozen=True, slots=True)
class GameState:
    """Value snapshot of the whole arena; every tick derives a new one."""

    player: Player
    enemies: Tuple[Enemy, ...] = ()
    paused: bool = False
    score: int = 0
    wave: int = 1
    last_spawn_time: float = 0.0
    passive_tree: PassiveTree | None = None
    rune_build: RuneBuild | None = None

    def enemy(self, enemy_id: str) -> Enemy | None:
        for enemy in self.enemies:
            if enemy.id == enemy_id:
                return enemy
        return None


def create_initial_state(config: GameConfig) -> GameState:
    player = Player(
        position=PLAYER_START,
        hp=config.player_max_hp,
        max_hp=config.player_max_hp,
        damage=config.player_base_damage,
        attack_speed=config.attack_speed,
    )
    return GameState(player=player)


def pause(state: GameState) -> GameState:
    return replace(state, paused=True)


def resume(state: GameState) -> GameState:
    return replace(state, paused=False)


def with_loadout(
    state: GameState,
    *,
    passive_tree: PassiveTree | None,
    rune_build: RuneBuild | None,
) -> GameState:
    return replace(state, passive_tree=passive_tree, rune_build=rune_build)
