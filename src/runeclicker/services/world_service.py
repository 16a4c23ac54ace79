"""Enemy spawning, movement and contact damage."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List

from runeclicker.core.geometry import Position, distance, normalize
from runeclicker.core.rng import RNG
from runeclicker.domain.config import COLLISION_DISTANCE, MOVE_SCALE, GameConfig
from runeclicker.domain.entities import Enemy
from runeclicker.domain.events import (
    EnemySpawnedEvent,
    EngineEvent,
    GameOverEvent,
    PlayerDamagedEvent,
)
from runeclicker.domain.state import GameState
from runeclicker.services.factories import create_enemy


@dataclass(slots=True)
class WorldStep:
    state: GameState
    events: List[EngineEvent] = field(default_factory=list)


class WorldService:
    """Pure world transitions; randomness comes only from the injected RNG."""

    def __init__(self, config: GameConfig, rng: RNG) -> None:
        self._config = config
        self._rng = rng

    def should_spawn(self, state: GameState, now: float) -> bool:
        return now - state.last_spawn_time > self._config.spawn_interval

    def spawn_enemy(self, state: GameState, now: float) -> WorldStep:
        enemy = create_enemy(
            state.player.position,
            state.wave,
            self._config,
            self._rng,
            taken_ids={existing.id for existing in state.enemies},
        )
        new_state = replace(state, enemies=state.enemies + (enemy,), last_spawn_time=now)
        return WorldStep(new_state, [EnemySpawnedEvent(enemy_id=enemy.id)])

    def move_enemies(self, state: GameState, delta_ms: float) -> GameState:
        target = state.player.position
        moved = tuple(self._step_toward(enemy, target, delta_ms) for enemy in state.enemies)
        return replace(state, enemies=moved)

    @staticmethod
    def _step_toward(enemy: Enemy, target: Position, delta_ms: float) -> Enemy:
        gap = distance(enemy.position, target)
        if gap <= COLLISION_DISTANCE:
            return enemy
        dx, dy = normalize(target.x - enemy.position.x, target.y - enemy.position.y)
        step = min(enemy.speed * delta_ms * MOVE_SCALE, gap)
        return replace(
            enemy,
            position=Position(enemy.position.x + dx * step, enemy.position.y + dy * step),
        )

    def resolve_contact(self, state: GameState) -> WorldStep:
        """Apply every touching enemy's damage as one hit; touching enemies are consumed."""
        survivors: List[Enemy] = []
        total_damage = 0.0
        for enemy in state.enemies:
            if distance(enemy.position, state.player.position) <= COLLISION_DISTANCE:
                total_damage += enemy.damage
            else:
                survivors.append(enemy)

        if total_damage <= 0:
            return WorldStep(state)

        hp = max(0.0, state.player.hp - total_damage)
        new_state = replace(
            state,
            enemies=tuple(survivors),
            player=replace(state.player, hp=hp),
            paused=True if hp <= 0 else state.paused,
        )
        events: List[EngineEvent] = [PlayerDamagedEvent(amount=total_damage, hp=hp)]
        if hp <= 0:
            events.append(GameOverEvent(score=new_state.score, wave=new_state.wave))
        return WorldStep(new_state, events)
