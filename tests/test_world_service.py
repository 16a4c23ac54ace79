from __future__ import annotations

import pytest

from runeclicker.domain.config import DEFAULT_CONFIG, PLAYER_START, SPAWN_DISTANCE
from runeclicker.domain.events import EnemySpawnedEvent, GameOverEvent, PlayerDamagedEvent
from runeclicker.domain.state import GameState
from runeclicker.services.world_service import WorldService
from tests.helpers.builders import ScriptedRNG, make_enemy, make_player


def _service(rng=None) -> WorldService:
    return WorldService(DEFAULT_CONFIG, rng or ScriptedRNG())


def test_spawn_waits_for_interval() -> None:
    service = _service()
    state = GameState(player=make_player(), last_spawn_time=0)
    assert not service.should_spawn(state, 2000)
    assert service.should_spawn(state, 2001)


def test_spawn_places_scaled_enemy_on_ring() -> None:
    service = _service(ScriptedRNG(angle=0.0))
    state = GameState(player=make_player(), wave=2)
    step = service.spawn_enemy(state, 2500)

    assert len(step.state.enemies) == 1
    enemy = step.state.enemies[0]
    assert enemy.position.x == pytest.approx(PLAYER_START.x + SPAWN_DISTANCE)
    assert enemy.position.y == pytest.approx(PLAYER_START.y)
    assert enemy.hp == pytest.approx(140)
    assert enemy.level == 2
    assert enemy.experience_value == 20
    assert step.state.last_spawn_time == 2500
    assert step.events == [EnemySpawnedEvent(enemy_id=enemy.id)]
    assert state.enemies == ()


def test_spawned_ids_are_unique() -> None:
    service = _service()
    state = GameState(player=make_player())
    for now in range(5):
        state = service.spawn_enemy(state, now).state
    assert len({enemy.id for enemy in state.enemies}) == 5


def test_enemies_walk_toward_player_until_melee_range() -> None:
    far = make_enemy("far", offset=(100.0, 0.0), speed=0.5)
    near = make_enemy("near", offset=(0.0, 25.0))
    state = GameState(player=make_player(), enemies=(far, near))

    moved = _service().move_enemies(state, 100)

    assert moved.enemies[0].position.x == pytest.approx(PLAYER_START.x + 97.0)
    assert moved.enemies[0].position.y == pytest.approx(PLAYER_START.y)
    assert moved.enemies[1] == near


def test_contact_damage_is_aggregated_once_per_tick() -> None:
    touching_a = make_enemy("a", offset=(10.0, 0.0), damage=10)
    touching_b = make_enemy("b", offset=(0.0, -20.0), damage=10)
    distant = make_enemy("c", offset=(200.0, 0.0), damage=10)
    state = GameState(player=make_player(hp=1000.0), enemies=(touching_a, touching_b, distant))

    step = _service().resolve_contact(state)

    assert step.state.player.hp == 980
    assert [enemy.id for enemy in step.state.enemies] == ["c"]
    assert step.events == [PlayerDamagedEvent(amount=20, hp=980)]
    assert not step.state.paused


def test_no_contact_leaves_state_untouched() -> None:
    state = GameState(player=make_player(), enemies=(make_enemy("c", offset=(200.0, 0.0)),))
    step = _service().resolve_contact(state)
    assert step.state is state
    assert step.events == []


def test_lethal_contact_pauses_the_game() -> None:
    state = GameState(player=make_player(hp=15.0), enemies=(make_enemy("a", offset=(5.0, 0.0), damage=40),))
    step = _service().resolve_contact(state)

    assert step.state.player.hp == 0
    assert step.state.paused
    assert isinstance(step.events[-1], GameOverEvent)
