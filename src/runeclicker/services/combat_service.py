"""Attack resolution: targeting, chaining, crits and kill rewards."""
from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import List, Sequence

from runeclicker.core.geometry import distance
from runeclicker.core.rng import RNG
from runeclicker.domain.config import BEAM_TICK_MS, CHAIN_FALLOFF, CHAIN_RANGE, GameConfig
from runeclicker.domain.entities import Enemy
from runeclicker.domain.events import (
    EnemyDamagedEvent,
    EnemyKilledEvent,
    EngineEvent,
    PlayerLeveledUpEvent,
    WaveAdvancedEvent,
)
from runeclicker.domain.experience import add_experience
from runeclicker.domain.rune_build import chain_count
from runeclicker.domain.stat_aggregation import (
    effective_attack_speed,
    effective_damage,
    roll_critical,
)
from runeclicker.domain.state import GameState

SCORE_PER_KILL_PER_WAVE = 10
WAVE_SCORE_STEP = 100


@dataclass(slots=True)
class AttackOutcome:
    state: GameState
    events: List[EngineEvent] = field(default_factory=list)

    @property
    def attacked(self) -> bool:
        return any(isinstance(event, EnemyDamagedEvent) for event in self.events)


def select_targets(state: GameState, count: int) -> List[Enemy]:
    """Greedy nearest-unvisited chain.

    A single-target attack always hits the enemy nearest the player. A chain
    starts at the player and each hop picks the enemy nearest the previous
    position, as long as it lies within CHAIN_RANGE.
    """
    remaining = list(state.enemies)
    if not remaining or count <= 0:
        return []
    origin = state.player.position
    selected: List[Enemy] = []
    while remaining and len(selected) < count:
        nearest = min(remaining, key=lambda enemy: distance(origin, enemy.position))
        if (selected or count > 1) and distance(origin, nearest.position) > CHAIN_RANGE:
            break
        selected.append(nearest)
        remaining.remove(nearest)
        origin = nearest.position
    return selected


class CombatService:
    """Resolve player attacks against the current snapshot."""

    def __init__(self, config: GameConfig, rng: RNG) -> None:
        self._config = config
        self._rng = rng

    @staticmethod
    def attack_interval(state: GameState) -> float:
        speed = effective_attack_speed(state)
        if speed <= 0:
            return math.inf
        return 1000 / speed

    def can_attack(self, state: GameState, now: float) -> bool:
        return now - state.player.last_attack_time >= self.attack_interval(state)

    def handle_click(self, state: GameState, now: float) -> AttackOutcome:
        """Attack if the cooldown has elapsed; otherwise leave the state as is."""
        if state.paused or not self.can_attack(state, now):
            return AttackOutcome(state)
        return self.perform_attack(state, now)

    def handle_beam(self, state: GameState, now: float) -> AttackOutcome:
        """Channelled damage every BEAM_TICK_MS while the attack is held."""
        player = state.player
        if state.paused or not player.is_holding_attack:
            return AttackOutcome(state)
        if player.last_dot_time is not None and now - player.last_dot_time <= BEAM_TICK_MS:
            return AttackOutcome(state)
        ticked = replace(state, player=replace(player, last_dot_time=now))
        return self.perform_attack(ticked, now)

    def perform_attack(self, state: GameState, now: float) -> AttackOutcome:
        targets = select_targets(state, chain_count(state.rune_build))
        if not targets:
            return AttackOutcome(state)

        base_damage = effective_damage(state)
        events: List[EngineEvent] = []
        current = state
        for hop, target in enumerate(targets):
            roll = roll_critical(base_damage * CHAIN_FALLOFF**hop, current, self._rng)
            outcome = self.apply_damage(current, target.id, math.floor(roll.damage), is_critical=roll.is_critical)
            current = outcome.state
            events.extend(outcome.events)

        current = replace(current, player=replace(current.player, last_attack_time=now))
        return AttackOutcome(current, events)

    def apply_damage(
        self,
        state: GameState,
        enemy_id: str,
        amount: int,
        *,
        is_critical: bool = False,
    ) -> AttackOutcome:
        target = state.enemy(enemy_id)
        if target is None:
            return AttackOutcome(state)

        events: List[EngineEvent] = [EnemyDamagedEvent(enemy_id=enemy_id, amount=amount, is_critical=is_critical)]
        hp = target.hp - amount
        if hp > 0:
            enemies = tuple(replace(e, hp=hp) if e.id == enemy_id else e for e in state.enemies)
            return AttackOutcome(replace(state, enemies=enemies), events)

        survivors = tuple(e for e in state.enemies if e.id != enemy_id)
        experience = target.experience_value * self._config.experience_multiplier
        player = add_experience(state.player, experience)
        new_state = replace(
            state,
            enemies=survivors,
            score=state.score + SCORE_PER_KILL_PER_WAVE * state.wave,
            player=player,
        )
        events.append(EnemyKilledEvent(enemy_id=enemy_id, experience=experience))
        events.extend(PlayerLeveledUpEvent(level=level) for level in range(state.player.level + 1, player.level + 1))

        if not survivors and new_state.score > 0 and new_state.score % WAVE_SCORE_STEP == 0:
            new_state = replace(new_state, wave=new_state.wave + 1)
            events.append(WaveAdvancedEvent(wave=new_state.wave))
        return AttackOutcome(new_state, events)


def total_damage(events: Sequence[EngineEvent]) -> int:
    return sum(event.amount for event in events if isinstance(event, EnemyDamagedEvent))
